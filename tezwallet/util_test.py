import logging

from .util		import commas, log_level


def test_log_level():
    assert log_level( 0 ) == logging.WARNING
    assert log_level( 1 ) == logging.INFO
    assert log_level( 2 ) == log_level( 9 ) == logging.DEBUG
    assert log_level( -1 ) == logging.ERROR
    assert log_level( -9 ) == logging.FATAL


def test_commas():
    assert commas( (98, 54), final='or' ) == "98 or 54"
    assert commas( (1, 2, 3, 5, 7), final='and' ) == "1-3, 5 and 7"
    assert commas( ("tz1", "edpk", "edsk") ) == "tz1, edpk, edsk"
    assert commas( [88] ) == "88"
