
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

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

#
# Mnemonic -> Seed stretching (BIP-39 style PBKDF2-HMAC-SHA512, truncated to the ed25519 seed size)
#
#     seed = PBKDF2( mnemonic, "mnemonic" + password, 2048, 32, SHA-512 )
#
MNEMONIC_SALT			= "mnemonic"
MNEMONIC_ITERATIONS		= 2048
MNEMONIC_STRENGTH		= 256		# bits; a fresh 24-word BIP-39 phrase
MNEMONIC_LANGUAGE		= "english"

SEED_BYTES			= 32		# ed25519 seed
PUBKEY_BYTES			= 32		# ed25519 public key
PRVKEY_BYTES			= 64		# ed25519 expanded private key: seed || pubkey

#
# Encrypted secret key envelope (edesk...): salt || secretbox( seed )
#
#     key = PBKDF2( password, salt, 32768, 32, SHA-512 )
#
# The secretbox nonce is *always* all zeros; it is not transmitted.  We only ever decrypt existing
# envelopes, never create new ones.
#
ENCRYPTED_ITERATIONS		= 32768
ENCRYPTED_SALT_BYTES		= 8
ENCRYPTED_KEY_BYTES		= 32
ENCRYPTED_NONCE_BYTES		= 24
ENCRYPTED_MAC_BYTES		= 16

# Address (tz1...) payload is a 160-bit BLAKE2b digest of the public key
ADDRESS_DIGEST_BYTES		= 20

# Base58Check checksum: first 4 bytes of SHA-256( SHA-256( prefix || payload ))
CHECKSUM_BYTES			= 4

# Scheme prefixes found eg. in tezos-client's secret_keys file
SCHEME_UNENCRYPTED		= "unencrypted:"
SCHEME_ENCRYPTED		= "encrypted:"
