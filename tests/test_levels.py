import pytest

from logkeeper.levels import Level, level_name, parse_level


def test_levels_are_ordered_by_severity():
    parsed = [parse_level(name) for name in ["FATAL", "DEBUG", "ERROR", "INFO", "WARNING"]]
    assert sorted(parsed) == [Level.DEBUG, Level.INFO, Level.WARNING, Level.ERROR, Level.FATAL]
    assert parse_level("DEBUG") < parse_level("INFO") < parse_level("WARNING")
    assert parse_level("WARNING") < parse_level("ERROR") < parse_level("FATAL")


@pytest.mark.parametrize("level", list(Level))
def test_name_round_trip(level):
    assert parse_level(level_name(level)) is level


def test_level_name_values():
    assert level_name(Level.WARNING) == "WARNING"
    assert level_name(Level.FATAL) == "FATAL"


def test_level_name_of_unknown_value():
    assert level_name(42) == "UNKNOWN"


@pytest.mark.parametrize("name", ["TRACE", "info", "", " DEBUG"])
def test_parse_unknown_level_raises(name):
    with pytest.raises(ValueError, match="Unknown level"):
        parse_level(name)