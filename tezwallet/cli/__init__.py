
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

import click
import json
import logging

from ..			import create_wallet, import_wallet, import_encrypted_wallet, generate_mnemonic, check_mnemonic
from ..defaults		import SCHEME_UNENCRYPTED, SCHEME_ENCRYPTED
from ..exceptions	import WalletError
from ..util		import log_cfg, log_level, input_secure

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

"""
Provide basic CLI access to the tezwallet API.

Output generally defaults to JSON.  Use -v for more details, and --no-json to emit standard text output instead.
"""

log				= logging.getLogger( __package__ )


@click.group()
@click.option('-v', '--verbose', count=True)
@click.option('-q', '--quiet', count=True)
@click.option( '--json/--no-json', default=True, help="Output JSON (the default)")
def cli( verbose, quiet, json ):
    cli.verbosity		= verbose - quiet
    log_cfg['level']		= log_level( cli.verbosity )
    logging.basicConfig( **log_cfg )
    if verbose or quiet:
        logging.getLogger().setLevel( log_cfg['level'] )
    cli.json			= json
cli.verbosity			= 0  # noqa: E305
cli.json			= True


def secure( value, prompt ):
    """Read a '-' value from stdin, warning if a secret was supplied on the command line."""
    if value == '-':
        return input_secure( prompt, secret=True )
    if value:
        log.warning( f"It is recommended to not supply the {prompt.rstrip( ': ' ).lower()} on the command line; specify '-' to read from input" )
    return value


def strip_scheme( text, scheme ):
    """Remove the leading scheme of a tezos-client secret_keys file entry, eg. 'unencrypted:edsk...'.
    The API accepts only the bare encoding.

    """
    if text.startswith( scheme ):
        log.debug( f"Stripping {scheme!r} scheme from supplied key" )
        return text[len( scheme ):]
    return text


def emit( wallet, secret ):
    details			= wallet.secret() if secret else wallet.public()
    if cli.json:
        click.echo( json.dumps( details, indent=4 ))
    else:
        for key,val in details.items():
            click.echo( f"{key:8} {val}" )


@click.command()
@click.option( "--mnemonic", help="The seed phrase; '-' reads it from stdin (default: generate a new 24-word BIP-39 phrase)" )
@click.option( "--password", default="", help="The wallet password; '-' reads it from stdin (default: none)" )
@click.option( "--secret/--no-secret", default=False, help="Also output the secret key, seed and mnemonic" )
def create( mnemonic, password, secret ):
    if mnemonic == '-':
        mnemonic		= input_secure( 'Mnemonic: ', secret=True )
    elif mnemonic:
        log.warning( "It is recommended to not use '--mnemonic <phrase>'; specify '-' to read from input" )
    else:
        mnemonic		= generate_mnemonic()
        if not secret:
            log.warning( "Generated a new mnemonic; use --secret to output it, or the wallet cannot be recovered" )
    if not check_mnemonic( mnemonic ):
        log.info( "Mnemonic is not a valid BIP-39 phrase; using it anyway" )
    password			= secure( password, 'Password: ' )
    try:
        wallet			= create_wallet( mnemonic, password or "" )
    except WalletError as exc:
        raise click.ClickException( str( exc ))
    emit( wallet, secret )


@click.command( "import" )
@click.option( "--address", required=True, help="The public key hash (tz1...) of the wallet" )
@click.option( "--pk", required=True, help="The public key (edpk...) of the wallet" )
@click.option( "--sk", required=True, help="The secret key or seed ([unencrypted:]edsk...) of the wallet; '-' reads it from stdin" )
@click.option( "--secret/--no-secret", default=False, help="Also output the secret key and seed" )
def import_( address, pk, sk, secret ):
    sk				= strip_scheme( secure( sk, 'Secret key: ' ), SCHEME_UNENCRYPTED )
    try:
        wallet			= import_wallet( address, pk, sk )
    except WalletError as exc:
        raise click.ClickException( str( exc ))
    emit( wallet, secret )


@click.command( "import-encrypted" )
@click.option( "--esk", required=True, help="The encrypted secret key ([encrypted:]edesk...) of the wallet" )
@click.option( "--password", required=True, help="The password used to encrypt the secret key; '-' reads it from stdin" )
@click.option( "--secret/--no-secret", default=False, help="Also output the decrypted secret key and seed" )
def import_encrypted( esk, password, secret ):
    esk				= strip_scheme( esk, SCHEME_ENCRYPTED )
    password			= secure( password, 'Password: ' )
    try:
        wallet			= import_encrypted_wallet( password, esk )
    except WalletError as exc:
        raise click.ClickException( str( exc ))
    emit( wallet, secret )


cli.add_command( create )
cli.add_command( import_ )
cli.add_command( import_encrypted )
