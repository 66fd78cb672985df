
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

from typing		import Optional

import base58

from .defaults		import CHECKSUM_BYTES
from .exceptions	import CodecError
from .prefix		import Prefix

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "b58cencode", "b58cdecode", "b58decode", "checksum", "prefix_of" )

log				= logging.getLogger( __package__ )


def checksum( data: bytes ) -> bytes:
    """The Base58Check suffix: the first 4 bytes of a double SHA-256."""
    return hashlib.sha256( hashlib.sha256( data ).digest() ).digest()[:CHECKSUM_BYTES]


def b58cencode( payload: bytes, prefix: Prefix ) -> str:
    """Encode the payload w/ the prefix's tag bytes, adding the 4-byte base58 check suffix.  Each
    leading zero byte is rendered as a leading '1'.

    """
    return base58.b58encode_check( prefix.data + payload ).decode( 'ascii' )


def b58decode( text: str, minimum: int = 0, field: str = "base58" ) -> bytes:
    """Decode and verify the base58 check encoded text, returning the data (including any tag
    bytes) without the checksum.  Requires at least 'minimum' bytes of data before the checksum.

    """
    # Not base58.b58decode_check; it reports a short input and a bad checksum as the same error
    try:
        raw			= base58.b58decode( text )
    except ValueError as exc:
        raise CodecError( field, reason=f"not valid base58: {exc}" ) from exc
    if len( raw ) < minimum + CHECKSUM_BYTES:
        raise CodecError( field, reason=f"decoded {len( raw )} bytes; at least {minimum + CHECKSUM_BYTES} required" )
    data,check			= raw[:-CHECKSUM_BYTES],raw[-CHECKSUM_BYTES:]
    if checksum( data ) != check:
        raise CodecError( field, reason=f"checksum {check.hex()} does not match {checksum( data ).hex()}" )
    return data


def b58cdecode( text: str, prefix: Prefix ) -> bytes:
    """Decode the base58 check text and strip the number of tag bytes used by the prefix, returning
    the payload.  The tag bytes themselves are not examined; callers select (and validate the tag
    text for) the kind they expect.

    """
    data			= b58decode( text, minimum=len( prefix.data ), field=prefix.tag )
    return data[len( prefix.data ):]


def prefix_of( text: str ) -> Optional[Prefix]:
    """Identify the kind of an encoded string by its tag and length, or None if unrecognized."""
    for prefix in Prefix:
        if len( text ) == prefix.length and text.startswith( prefix.tag ):
            return prefix
    log.debug( f"Unrecognized encoding of {len( text )} characters: {text[:5]!r}..." )
    return None
