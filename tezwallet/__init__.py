
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

from .version		import __version__  # noqa F401
from .api		import *  # noqa F403
from .api		import __all__ as api_all
from .codec		import b58cencode, b58cdecode, prefix_of  # noqa F401
from .crypto		import (  # noqa F401
    seed_from_mnemonic, keypair_from_seed, public_key_hash, generate_mnemonic, check_mnemonic,
)
from .exceptions	import *  # noqa F403
from .exceptions	import __all__ as exceptions_all
from .prefix		import Prefix, PREFIXES  # noqa F401

__all__				= api_all + exceptions_all + (
    "b58cencode", "b58cdecode", "prefix_of",
    "seed_from_mnemonic", "keypair_from_seed", "public_key_hash", "generate_mnemonic", "check_mnemonic",
    "Prefix", "PREFIXES",
)
