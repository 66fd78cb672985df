import base58
import pytest

from .codec		import b58cencode, b58cdecode, b58decode, checksum, prefix_of
from .exceptions	import CodecError
from .prefix		import Prefix

PK_BOOTSTRAP1			= "edpkuBknW28nW72KG6RoHtYW7p12T6GKc7nAbwYX5m8Wd9sDVC9yav"


@pytest.mark.parametrize( "prefix", list( Prefix ))
def test_b58c_roundtrip( prefix ):
    payload			= bytes( i * 7 % 256 for i in range( prefix.payload ))
    encoded			= b58cencode( payload, prefix )
    assert b58cdecode( encoded, prefix ) == payload
    assert prefix_of( encoded ) is prefix


def test_b58c_leading_zeros():
    """Leading zero bytes are preserved, as leading '1's."""
    encoded			= b58cencode( b'\0\0\1', Prefix.PUBLIC_KEY_HASH )
    assert b58cdecode( encoded, Prefix.PUBLIC_KEY_HASH ) == b'\0\0\1'
    data			= b58decode( encoded )
    assert data == Prefix.PUBLIC_KEY_HASH.data + b'\0\0\1'

    zeros			= base58.b58encode( b'\0\0' + checksum( b'\0\0' )).decode( 'ascii' )
    assert zeros.startswith( '11' )
    assert b58decode( zeros ) == b'\0\0'


def test_b58cdecode_errors():
    # Not base58; '0', 'O', 'I' and 'l' are excluded from the alphabet
    with pytest.raises( CodecError ) as excinfo:
        b58cdecode( "edpk0OIl", Prefix.PUBLIC_KEY )
    assert "not valid base58" in str( excinfo.value )
    assert excinfo.value.field == "edpk"

    # Too short to contain the prefix and a checksum
    with pytest.raises( CodecError ) as excinfo:
        b58cdecode( "2g", Prefix.PUBLIC_KEY )
    assert "at least 8 required" in str( excinfo.value )

    # Corrupt the final character; the checksum no longer matches
    last			= 'b' if PK_BOOTSTRAP1[-1] == 'a' else 'a'
    with pytest.raises( CodecError ) as excinfo:
        b58cdecode( PK_BOOTSTRAP1[:-1] + last, Prefix.PUBLIC_KEY )
    assert "checksum" in str( excinfo.value )

    assert len( b58cdecode( PK_BOOTSTRAP1, Prefix.PUBLIC_KEY )) == 32


def test_b58cdecode_prefix_agnostic():
    """The decoder strips as many bytes as the supplied prefix has, w/o examining them."""
    encoded			= b58cencode( bytes( 32 ), Prefix.SEED )
    assert b58cdecode( encoded, Prefix.PUBLIC_KEY ) == bytes( 32 )
    assert b58cdecode( encoded, Prefix.PUBLIC_KEY_HASH ) == Prefix.SEED.data[-1:] + bytes( 32 )


def test_prefix_of():
    assert prefix_of( PK_BOOTSTRAP1 ) is Prefix.PUBLIC_KEY
    assert prefix_of( "tz1KqTpEZ7Yob7QbPE4Hy4Wo8fHG8LhKxZSx" ) is Prefix.PUBLIC_KEY_HASH
    assert prefix_of( "edsk3gUfUPyBSfrS9CCgmCiQsTCHGkviBDusMxDJstFtojtc1zcpsh" ) is Prefix.SEED
    assert prefix_of( "KT1abc" ) is None
    assert prefix_of( PK_BOOTSTRAP1[:-1] ) is None
