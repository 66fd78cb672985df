
#
# Python-tezwallet -- Tezos ed25519 Wallet Derivation and Import
#
# Copyright (c) 2022, Dominion Research & Development Corp.
#
# Python-tezwallet is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  It is also available under alternative (eg. Commercial) licenses, at
# your option.  See the LICENSE file at the top of the source tree.
#
# Python-tezwallet is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#
from __future__		import annotations

import hashlib
import logging

from typing		import Tuple, Union

from Crypto.Hash	import SHA512
from Crypto.Protocol.KDF import PBKDF2

from mnemonic		import Mnemonic

from nacl.bindings	import crypto_sign_seed_keypair
from nacl.exceptions	import CryptoError
from nacl.secret	import SecretBox

from .codec		import b58cencode
from .defaults		import (
    MNEMONIC_SALT, MNEMONIC_ITERATIONS, MNEMONIC_STRENGTH, MNEMONIC_LANGUAGE,
    SEED_BYTES, PUBKEY_BYTES, ADDRESS_DIGEST_BYTES,
    ENCRYPTED_ITERATIONS, ENCRYPTED_KEY_BYTES, ENCRYPTED_NONCE_BYTES, ENCRYPTED_SALT_BYTES,
)
from .exceptions	import AuthenticationError, HashError, ValidationError
from .prefix		import Prefix

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "seed_from_mnemonic", "keypair_from_seed", "public_key_hash", "decrypt_seed",
    "generate_mnemonic", "check_mnemonic",
)

log				= logging.getLogger( __package__ )


def utf8( data: Union[str,bytes] ) -> bytes:
    """Passwords and phrases are used exactly as supplied, UTF-8 encoded; no normalization."""
    if isinstance( data, bytes ):
        return data
    return data.encode( 'UTF-8' )


def seed_from_mnemonic( mnemonic: Union[str,bytes], password: Union[str,bytes] = "" ) -> bytes:
    """Stretch the mnemonic + password into a 32-byte ed25519 seed.  This is the first 32 bytes of
    the BIP-39 seed, but *without* BIP-39's NFKD normalization of the phrase and password.

    Any mnemonic is accepted; validating its word list and checksum is the caller's concern (see
    check_mnemonic).

    """
    return PBKDF2(
        utf8( mnemonic ),
        utf8( MNEMONIC_SALT ) + utf8( password ),
        dkLen		= SEED_BYTES,
        count		= MNEMONIC_ITERATIONS,
        hmac_hash_module = SHA512,
    )


def keypair_from_seed( seed: bytes ) -> Tuple[bytes, bytes]:
    """Expand a 32-byte seed into the 64-byte ed25519 private key (seed || pubkey) and its 32-byte
    public key, returned as (prvkey, pubkey).

    """
    if len( seed ) != SEED_BYTES:
        raise ValidationError( "seed length", expected=SEED_BYTES, actual=len( seed ))
    pubkey,prvkey		= crypto_sign_seed_keypair( seed )
    return prvkey,pubkey


def public_key_hash( pubkey: bytes ) -> str:
    """Compute the tz1... address: the 20-byte BLAKE2b digest of the public key."""
    if len( pubkey ) != PUBKEY_BYTES:
        raise ValidationError( "public key length", expected=PUBKEY_BYTES, actual=len( pubkey ))
    try:
        digest			= hashlib.blake2b( pubkey, digest_size=ADDRESS_DIGEST_BYTES ).digest()
    except (ValueError, TypeError) as exc:
        raise HashError( "public key hash", reason=f"could not generate public hash from public key {pubkey.hex()}: {exc}" ) from exc
    return b58cencode( digest, Prefix.PUBLIC_KEY_HASH )


def decrypt_seed( password: Union[str,bytes], payload: bytes ) -> bytes:
    """Open an encrypted secret key payload (salt || secretbox) with the password, recovering the
    32-byte seed.  The key is derived from the password and salt; the nonce is always all zeros.
    Raises AuthenticationError if the secretbox authenticator fails to verify, revealing nothing
    of the (unauthenticated) plaintext.

    """
    salt,box			= payload[:ENCRYPTED_SALT_BYTES],payload[ENCRYPTED_SALT_BYTES:]
    key				= PBKDF2(
        utf8( password ),
        salt,
        dkLen		= ENCRYPTED_KEY_BYTES,
        count		= ENCRYPTED_ITERATIONS,
        hmac_hash_module = SHA512,
    )
    try:
        seed			= SecretBox( key ).decrypt( box, bytes( ENCRYPTED_NONCE_BYTES ))
    except CryptoError as exc:
        raise AuthenticationError() from exc
    finally:
        del key
    if len( seed ) != SEED_BYTES:
        raise ValidationError( "decrypted seed length", expected=SEED_BYTES, actual=len( seed ))
    return seed


def generate_mnemonic( strength: int = MNEMONIC_STRENGTH, language: str = MNEMONIC_LANGUAGE ) -> str:
    """Produce a fresh random BIP-39 mnemonic phrase, eg. for creating a new wallet."""
    return Mnemonic( language ).generate( strength=strength )


def check_mnemonic( mnemonic: str, language: str = MNEMONIC_LANGUAGE ) -> bool:
    """Whether the phrase is a valid BIP-39 mnemonic (word list and checksum).  Informational only;
    wallet creation accepts any phrase.

    """
    try:
        return Mnemonic( language ).check( mnemonic )
    except (LookupError, ValueError) as exc:
        log.debug( f"Mnemonic is not a valid {language} BIP-39 phrase: {exc}" )
        return False
