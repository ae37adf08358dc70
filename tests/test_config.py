"""Unit tests for configuration parsing."""

import pytest

from levellog import Flag, Level, STD_FLAGS
from levellog.config import parse_flags, parse_levels


def test_parse_flags():
    """Comma lists combine into one mask."""
    assert parse_flags("date,time") == STD_FLAGS
    assert parse_flags(" Date , MICROSECONDS,shortfile ") == (
        Flag.DATE | Flag.MICROSECONDS | Flag.SHORTFILE
    )
    assert parse_flags("std,utc") == STD_FLAGS | Flag.UTC


def test_parse_empty():
    """Empty value means nothing enabled."""
    assert parse_flags("") == Flag.NONE
    assert parse_levels("") == Level.NONE
    assert parse_levels("none") == Level.NONE


def test_parse_levels():
    """Named severities and the all bundle."""
    assert parse_levels("warning,error,fatal") == (
        Level.WARNING | Level.ERROR | Level.FATAL
    )
    assert parse_levels("all") == Level.ALL


def test_parse_unknown_name():
    """Unknown token is reported."""
    with pytest.raises(ValueError, match="'loud'"):
        parse_levels("info,loud")

    with pytest.raises(ValueError, match="unknown flag"):
        parse_flags("date,year")
