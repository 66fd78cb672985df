import os

from setuptools import setup

#
# All platforms
#
HERE				= os.path.dirname( os.path.abspath( __file__ ))


def requirements( name ):
    """Remove whitespace, elide blank lines and comments"""
    return list(
        ''.join( r.split() )
        for r in open( os.path.join( HERE, name )).readlines()
        if r.strip() and not r.strip().startswith( '#' )
    )


install_requires		= requirements( "requirements.txt" )
tests_require			= requirements( "requirements-tests.txt" )

# Since setuptools is retiring tests_require, add it as an option
extras_require			= {
    'tests':			tests_require,
}

# Must work if setup.py is run in the source distribution context, or from
# within the packaged distribution directory.
__version__			= None
try:
    exec( open( os.path.join( HERE, 'tezwallet', 'version.py' ), 'r' ).read() )
except FileNotFoundError:
    exec( open( 'version.py', 'r' ).read() )

console_scripts			= [
    'tezwallet		= tezwallet.cli:cli',
]

entry_points			= {
    'console_scripts': 		console_scripts,
}

package_dir			= {
    "tezwallet":		"./tezwallet",
    "tezwallet.cli":		"./tezwallet/cli",
}

long_description_content_type	= 'text/markdown'
long_description		= """\
Creating and importing Tezos wallets requires exact, byte-level agreement with
existing tooling: the base58check encodings (tz1..., edpk..., edsk...,
edesk...), the mnemonic seed stretching, and the password-encrypted secret key
envelope.

The [python-tezwallet] project derives ed25519 Tezos wallets from a mnemonic and
password, imports wallets from exported plaintext (edsk...) or encrypted
(edesk...) secret keys, and cross-checks every import against the supplied
address and public key, rejecting tampered or mismatched input.

## Creating a Wallet

    >>> from tezwallet import create_wallet
    >>> wallet = create_wallet( "abandon abandon ... about", "password" )
    >>> wallet.address, wallet.pk

## Importing a Wallet

    >>> from tezwallet import import_wallet, import_encrypted_wallet
    >>> import_wallet( "tz1KqTpEZ7Yob7QbPE4Hy4Wo8fHG8LhKxZSx",
    ...                "edpkuBknW28nW72KG6RoHtYW7p12T6GKc7nAbwYX5m8Wd9sDVC9yav",
    ...                "edsk3gUfUPyBSfrS9CCgmCiQsTCHGkviBDusMxDJstFtojtc1zcpsh" )
    >>> import_encrypted_wallet( "password", "edesk..." )

## On the Command Line

    $ tezwallet create --mnemonic - --secret
    $ tezwallet import --address tz1... --pk edpk... --sk -
    $ tezwallet import-encrypted --esk edesk... --password -

[python-tezwallet] <https://github.com/pjkundert/python-tezwallet.git>
"""

classifiers			= [
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "License :: Other/Proprietary License",
    "Programming Language :: Python :: 3",
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Environment :: Console",
    "Topic :: Security :: Cryptography",
    "Topic :: Office/Business :: Financial",
]
project_urls			= {
    "Bug Tracker": "https://github.com/pjkundert/python-tezwallet/issues",
}

setup(
    name			= "tezwallet",
    version			= __version__,
    install_requires		= install_requires,
    extras_require		= extras_require,
    packages			= package_dir.keys(),
    package_dir			= package_dir,
    include_package_data	= True,
    zip_safe			= True,
    entry_points		= entry_points,
    author			= "Perry Kundert",
    author_email		= "perry@dominionrnd.com",
    project_urls		= project_urls,
    description			= "Tezos ed25519 wallet derivation from mnemonics, and import of plaintext and encrypted secret keys",
    long_description		= long_description,
    long_description_content_type = long_description_content_type,
    license			= "Dual License; GPLv3 and Proprietary",
    keywords			= "Tezos cryptocurrency wallet ed25519 mnemonic base58check edsk edesk",
    url				= "https://github.com/pjkundert/python-tezwallet",
    classifiers			= classifiers,
    python_requires		= ">=3.9",
)
