
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
from __future__          import annotations

import logging

from dataclasses	import dataclass
from typing		import Dict, Optional

from .codec		import b58cencode, b58cdecode
from .crypto		import seed_from_mnemonic, keypair_from_seed, public_key_hash, decrypt_seed
from .defaults		import PRVKEY_BYTES, PUBKEY_BYTES, SEED_BYTES
from .exceptions	import ValidationError, MismatchError
from .prefix		import Prefix
from .util		import commas

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "KeyPair", "Wallet", "create_wallet", "import_wallet", "import_encrypted_wallet" )

log				= logging.getLogger( __package__ )


@dataclass( eq=True, frozen=True )
class KeyPair:
    """An ed25519 signing keypair: the 64-byte expanded private key (seed || pubkey), and the
    32-byte public key.  Always complete; never partially populated.

    """
    prvkey: bytes
    pubkey: bytes

    def __post_init__( self ):
        if len( self.prvkey ) != PRVKEY_BYTES:
            raise ValidationError( "private key length", expected=PRVKEY_BYTES, actual=len( self.prvkey ))
        if len( self.pubkey ) != PUBKEY_BYTES:
            raise ValidationError( "public key length", expected=PUBKEY_BYTES, actual=len( self.pubkey ))

    @classmethod
    def from_seed( cls, seed: bytes ) -> KeyPair:
        prvkey,pubkey		= keypair_from_seed( seed )
        return cls( prvkey=prvkey, pubkey=pubkey )

    def __repr__( self ):
        return f"{self.__class__.__name__}(pubkey={self.pubkey.hex()})"


@dataclass( eq=True, frozen=True )
class Wallet:
    """A Tezos wallet.  The address and pk are always those re-derived from keypair.pubkey; the sk
    is always the full 98-character edsk... encoding of the 64-byte private key.

    The mnemonic is empty unless the wallet was created from one; the seed is None if the wallet
    was imported from a full secret key.

    """
    address: str
    mnemonic: str
    seed: Optional[bytes]
    keypair: KeyPair
    sk: str
    pk: str

    def __repr__( self ):
        return f"{self.__class__.__name__}({self.address}, {self.pk})"

    def public( self ) -> Dict[str, str]:
        return dict(
            address	= self.address,
            pk		= self.pk,
        )

    def secret( self ) -> Dict[str, str]:
        """The public details, plus the secret key and (if known) the mnemonic and hex seed."""
        details			= dict( self.public(), sk=self.sk )
        if self.mnemonic:
            details['mnemonic']	= self.mnemonic
        if self.seed is not None:
            details['seed']	= self.seed.hex()
        return details


def require_tag( text: str, prefix: Prefix, field: str ):
    if not text.startswith( prefix.tag ):
        log.warning( f"Rejected {field}: prefix is not {prefix.tag}" )
        raise ValidationError( f"{field} prefix", expected=prefix.tag, actual=text[:len( prefix.tag )] )


def require_size( data: bytes, size: int, field: str ):
    if len( data ) != size:
        log.warning( f"Rejected {field}: decoded {len( data )} bytes, not {size}" )
        raise ValidationError( f"{field} size", expected=size, actual=len( data ))


def assemble(
    keypair: KeyPair,
    mnemonic: str		= "",
    seed: Optional[bytes]	= None,
    sk: Optional[str]		= None,
) -> Wallet:
    """Derive the address and encodings from the keypair, and produce the Wallet."""
    return Wallet(
        address		= public_key_hash( keypair.pubkey ),
        mnemonic	= mnemonic,
        seed		= seed,
        keypair		= keypair,
        sk		= sk or b58cencode( keypair.prvkey, Prefix.SECRET_KEY ),
        pk		= b58cencode( keypair.pubkey, Prefix.PUBLIC_KEY ),
    )


def create_wallet(
    mnemonic: str,
    password: str		= "",
) -> Wallet:
    """Create a wallet from the seed phrase (mnemonic) and optional password.  Deterministic: the
    same mnemonic and password always produce the same wallet.

    """
    seed			= seed_from_mnemonic( mnemonic, password )
    wallet			= assemble( KeyPair.from_seed( seed ), mnemonic=mnemonic, seed=seed )
    log.info( f"Created wallet {wallet.address} from {len( mnemonic.split() )}-word mnemonic" )
    return wallet


def import_wallet(
    address: str,
    pk: str,
    sk: str,
) -> Wallet:
    """Import an unencrypted wallet from its address (tz1...), public key (edpk...) and either
    its full secret key (98-character edsk...) or its seed (54-character edsk...).

    The address and public key are re-derived from the secret, and must match those supplied;
    this rejects tampered or mismatched imports.

    """
    lengths			= ( Prefix.SECRET_KEY.length, Prefix.SEED.length )
    if len( sk ) not in lengths:
        log.warning( f"Rejected secret key: length {len( sk )} is not {commas( lengths, final='or' )}" )
        raise ValidationError( "secret key length", expected=commas( lengths, final='or' ), actual=len( sk ))
    require_tag( sk, Prefix.SECRET_KEY, "secret key" )

    if len( sk ) == Prefix.SECRET_KEY.length:
        # A full secret key; the public key is its last 32 bytes.  Confirm it is the one derived
        # from the seed in its first 32 bytes, or it cannot produce valid signatures.
        prvkey			= b58cdecode( sk, Prefix.SECRET_KEY )
        require_size( prvkey, Prefix.SECRET_KEY.payload, "secret key" )
        keypair			= KeyPair( prvkey=prvkey, pubkey=prvkey[SEED_BYTES:] )
        _,pubkey		= keypair_from_seed( prvkey[:SEED_BYTES] )
        if pubkey != keypair.pubkey:
            raise MismatchError(
                "secret key public half",
                expected	= b58cencode( keypair.pubkey, Prefix.PUBLIC_KEY ),
                actual		= b58cencode( pubkey, Prefix.PUBLIC_KEY ),
            )
        wallet			= assemble( keypair, sk=sk )
    else:
        # Actually a seed; reconstruct the keypair.  The wallet's sk is always the full secret key.
        seed			= b58cdecode( sk, Prefix.SEED )
        require_size( seed, Prefix.SEED.payload, "seed" )
        wallet			= assemble( KeyPair.from_seed( seed ), seed=seed )

    if wallet.address != address:
        log.warning( f"Rejected import: reconstructed address {wallet.address} does not match {address}" )
        raise MismatchError( "address", expected=address, actual=wallet.address )
    if wallet.pk != pk:
        log.warning( f"Rejected import: reconstructed pk {wallet.pk} does not match {pk}" )
        raise MismatchError( "public key", expected=pk, actual=wallet.pk )

    log.info( f"Imported wallet {wallet.address} from {'seed' if wallet.seed else 'secret key'}" )
    return wallet


def import_encrypted_wallet(
    password: str,
    esk: str,
) -> Wallet:
    """Import a wallet from its password-encrypted secret key (88-character edesk...).  A wrong
    password raises AuthenticationError.

    """
    if len( esk ) != Prefix.ENCRYPTED_SECRET_KEY.length:
        log.warning( f"Rejected encrypted secret key: length {len( esk )} is not {Prefix.ENCRYPTED_SECRET_KEY.length}" )
        raise ValidationError( "encrypted secret key length", expected=Prefix.ENCRYPTED_SECRET_KEY.length, actual=len( esk ))
    require_tag( esk, Prefix.ENCRYPTED_SECRET_KEY, "encrypted secret key" )

    # The tag bytes are stripped by count; the tag characters were confirmed above
    payload			= b58cdecode( esk, Prefix.ENCRYPTED_SECRET_KEY )
    require_size( payload, Prefix.ENCRYPTED_SECRET_KEY.payload, "encrypted secret key" )
    seed			= decrypt_seed( password, payload )
    wallet			= assemble( KeyPair.from_seed( seed ), seed=seed )
    log.info( f"Imported wallet {wallet.address} from encrypted secret key" )
    return wallet
