import pytest

from bitlog.level import LogLevel, level_name


def test_levels_are_ordered_by_severity():
    names = [level_name(level) for level in sorted(LogLevel)]
    assert names == ["UNKNOW", "DEBUG", "INFO", "WARN", "ERROR", "FATAL", "OFF"]
    assert level_name(0) == "UNKNOW"


@pytest.mark.parametrize(
    "level, name",
    [
        (LogLevel.DEBUG, "DEBUG"),
        (LogLevel.INFO, "INFO"),
        (LogLevel.WARN, "WARN"),
        (LogLevel.ERROR, "ERROR"),
        (LogLevel.FATAL, "FATAL"),
        (LogLevel.OFF, "OFF"),
        (LogLevel.UNKNOW, "UNKNOW"),
    ],
)
def test_level_name(level, name):
    assert level_name(level) == name


def test_level_name_out_of_range_is_unknow():
    assert level_name(99) == "UNKNOW"
    assert level_name(-1) == "UNKNOW"