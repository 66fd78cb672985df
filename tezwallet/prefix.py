
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

from collections	import namedtuple
from enum		import Enum
from types		import MappingProxyType

from .defaults		import (
    ADDRESS_DIGEST_BYTES, PUBKEY_BYTES, PRVKEY_BYTES, SEED_BYTES,
    ENCRYPTED_SALT_BYTES, ENCRYPTED_MAC_BYTES,
)

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "Prefix", "PrefixInfo", "PREFIXES" )


class Prefix( Enum ):
    """The semantic kind of a Base58Check encoded string.  The tag bytes prepended to the payload
    are chosen so that the base58 encoding always begins with the same human-recognizable tag,
    eg. 'tz1...' for an address.

    """
    PUBLIC_KEY_HASH		= 1
    PUBLIC_KEY			= 2
    SECRET_KEY			= 3
    SEED			= 4
    ENCRYPTED_SECRET_KEY	= 5

    @property
    def data( self ) -> bytes:
        return PREFIXES[self].data

    @property
    def tag( self ) -> str:
        return PREFIXES[self].tag

    @property
    def payload( self ) -> int:
        return PREFIXES[self].payload

    @property
    def length( self ) -> int:
        return PREFIXES[self].length


# data:		The binary tag prepended to the payload before base58 check encoding
# tag:		The resultant leading characters of the encoded string
# payload:	The expected payload size (in bytes) following the tag
# length:	The total encoded string length (in characters)
PrefixInfo			= namedtuple( 'PrefixInfo', ('data', 'tag', 'payload', 'length') )

PREFIXES			= MappingProxyType( {
    Prefix.PUBLIC_KEY_HASH:	PrefixInfo( bytes((  6, 161, 159          )), "tz1",   ADDRESS_DIGEST_BYTES, 36 ),
    Prefix.PUBLIC_KEY:		PrefixInfo( bytes(( 13,  15,  37, 217     )), "edpk",  PUBKEY_BYTES,         54 ),
    Prefix.SECRET_KEY:		PrefixInfo( bytes(( 43, 246,  78,   7     )), "edsk",  PRVKEY_BYTES,         98 ),
    Prefix.SEED:		PrefixInfo( bytes(( 13,  15,  58,   7     )), "edsk",  SEED_BYTES,           54 ),
    Prefix.ENCRYPTED_SECRET_KEY: PrefixInfo( bytes((  7,  90,  60, 179, 41 )), "edesk",
                                             ENCRYPTED_SALT_BYTES + SEED_BYTES + ENCRYPTED_MAC_BYTES, 88 ),
} )
