
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

from typing		import Any, Optional

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "WalletError", "ValidationError", "CodecError", "MismatchError", "AuthenticationError", "HashError",
)


class WalletError( ValueError ):
    """Base of all tezwallet failures.  Each carries the name of the offending 'field', and either
    the 'expected' vs. 'actual' values, or a 'reason'.  None of these are retryable; they all
    stem from the (immutable) input supplied.

    """
    def __init__( self, field: str, expected: Any = None, actual: Any = None, reason: Optional[str] = None ):
        self.field		= field
        self.expected		= expected
        self.actual		= actual
        self.reason		= reason
        super().__init__( str( self ))

    def __str__( self ):
        if self.reason is not None:
            return f"{self.field}: {self.reason}"
        return f"{self.field}: expected {self.expected}, not {self.actual!r}"


class ValidationError( WalletError ):
    """Structurally malformed input, eg. wrong length or wrong tag prefix."""


class CodecError( WalletError ):
    """Base58 decoding failure, or checksum mismatch."""


class MismatchError( WalletError ):
    """A re-derived value disagrees with the value supplied by the caller."""
    def __str__( self ):
        return f"reconstructed {self.field} {self.actual!r} does not match provided {self.field} {self.expected!r}"


class AuthenticationError( WalletError ):
    """The password-derived key failed to open the encrypted secret key envelope."""
    def __init__( self, field: str = "encrypted secret key", reason: str = "invalid password" ):
        super().__init__( field, reason=reason )


class HashError( WalletError ):
    """Internal digest construction failure; never expected for valid input."""
