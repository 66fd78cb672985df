
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

import getpass
import logging
import sys

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( "util" )

log_cfg				= {
    "level":	logging.WARNING,
    "datefmt":	'%Y-%m-%d %H:%M:%S',
    "format":	'%(asctime)s %(name)-16.16s %(message)s',
}

log_levelmap 			= {
    -2: logging.FATAL,
    -1: logging.ERROR,
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


def log_level( adjust ):
    """Return a logging level corresponding to the +'ve/-'ve verbosity adjustment, clamped to the
    available levels.

    """
    return log_levelmap[
        max(
            min(
                adjust,
                max( log_levelmap.keys() )
            ),
            min( log_levelmap.keys() )
        )
    ]


def commas( seq, final=None ):  # supply alternative final connector, eg. 'and', 'or'
    """Join a sequence for display, eg. 98, 54 or 36.  Any run of 3 or more consecutive integers
    is collapsed, eg. 1, 2, 3, 5 becomes 1-3 and 5.

    """
    def int_seq( seq ):
        for i,iv in enumerate( seq[:-1] ):
            if type(iv) is int:
                for j,jv in enumerate( seq[i:] ):
                    if type(jv) is not int or jv != iv + j:
                        j      -= 1
                        break
                if j > 1:
                    return (i,i+j)
        return None
    seq				= list( seq )
    while rng := int_seq( seq ):
        nxt			= rng[1] + 1
        seq			= seq[:rng[0]] + [f"{seq[rng[0]]}-{seq[rng[1]]}"] + seq[nxt:]
    if final and len(seq) > 1:
        seq			= seq[:-2] + [f"{seq[-2]} {final} {seq[-1]}"]
    return ', '.join( map( str, seq ))


def input_secure( prompt, secret=True, file=None ):
    """When getting secure (optionally secret) input from standard input, we don't want to use
    getpass unless we're on a TTY; when pipelined, read a line w/o littering output w/ prompts.

    """
    if ( file or sys.stdin ).isatty():
        if secret:
            return getpass.getpass( prompt, stream=file )
        elif file:
            return file.readline().rstrip( '\n' )
        else:
            return input( prompt )
    if file:
        return file.readline().rstrip( '\n' )
    return input()
