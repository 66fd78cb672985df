import pytest

from .prefix		import Prefix, PREFIXES
from .codec		import b58cencode


def test_prefix_registry():
    """Every kind of encoding has an entry, and the registry cannot be altered."""
    assert set( PREFIXES ) == set( Prefix )
    with pytest.raises( TypeError ):
        PREFIXES[Prefix.SEED]	= PREFIXES[Prefix.SECRET_KEY]

    assert Prefix.PUBLIC_KEY_HASH.data == b'\x06\xa1\x9f'
    assert Prefix.ENCRYPTED_SECRET_KEY.data == b'\x07\x5a\x3c\xb3\x29'
    assert Prefix.SECRET_KEY.tag == Prefix.SEED.tag == "edsk"
    assert Prefix.SECRET_KEY.data != Prefix.SEED.data


@pytest.mark.parametrize( "prefix, tag, length", [
    ( Prefix.PUBLIC_KEY_HASH,		"tz1",		36 ),
    ( Prefix.PUBLIC_KEY,		"edpk",		54 ),
    ( Prefix.SECRET_KEY,		"edsk",		98 ),
    ( Prefix.SEED,			"edsk",		54 ),
    ( Prefix.ENCRYPTED_SECRET_KEY,	"edesk",	88 ),
] )
def test_prefix_tags( prefix, tag, length ):
    """The tag bytes always produce the same leading characters and encoded length, regardless of
    the payload content.

    """
    assert prefix.tag == tag
    assert prefix.length == length
    for fill in ( 0x00, 0x5a, 0xff ):
        encoded			= b58cencode( bytes( [fill] ) * prefix.payload, prefix )
        assert encoded.startswith( tag )
        assert len( encoded ) == length
