import io
import time

import pytest

from bitlog.formatter import (
    DEFAULT_PATTERN,
    Formatter,
    PatternError,
    create_item,
    parse_pattern,
)
from bitlog.level import LogLevel
from bitlog.message import LogMsg


@pytest.fixture
def msg():
    return LogMsg("net", "server.py", 17, "payload text", LogLevel.ERROR,
                  ctime=1_700_000_000)


def test_parse_pattern_tokens():
    tokens = parse_pattern("%d{%Y}x%%y%m")
    assert tokens == [("d", "%Y", True), ("x%y", "", False), ("m", "", True)]


def test_parse_pattern_trailing_literal():
    tokens = parse_pattern("%p: end")
    assert tokens[-1] == (": end", "", False)
    assert tokens[0] == ("p", "", True)


@pytest.mark.parametrize("pattern", ["abc%", "%1x", "%d{abc", "x%{y}"])
def test_parse_pattern_errors(pattern):
    with pytest.raises(PatternError):
        parse_pattern(pattern)


def test_unknown_format_character_rejected():
    with pytest.raises(PatternError):
        Formatter("%z")
    with pytest.raises(PatternError):
        create_item("q", "")


def test_create_item_renders_fields(msg):
    assert create_item("m", "")(msg) == msg.payload
    assert create_item("c", "")(msg) == msg.name
    assert create_item("f", "")(msg) == msg.file
    assert create_item("l", "")(msg) == str(msg.line)
    assert create_item("p", "")(msg) == "ERROR"
    assert create_item("T", "")(msg) == "\t"
    assert create_item("n", "")(msg) == "\n"


def test_default_pattern_output(msg):
    formatter = Formatter()
    assert formatter.pattern == DEFAULT_PATTERN
    stamp = time.strftime("%H:%M:%S", time.localtime(msg.ctime))
    expected = (f"[{stamp}][{msg.tid}][ERROR][{msg.name}]"
                f"[{msg.file}:{msg.line}] {msg.payload}\n")
    assert formatter.format(msg) == expected


def test_empty_time_subformat_uses_default(msg):
    assert Formatter("%d{}").format(msg) == Formatter("%d").format(msg)
    assert Formatter("%d").format(msg) == Formatter("%d{%H:%M:%S}").format(msg)


def test_custom_time_subformat(msg):
    rendered = Formatter("%d{%Y-%m-%d}").format(msg)
    assert rendered == time.strftime("%Y-%m-%d", time.localtime(msg.ctime))


def test_message_only_pattern(msg):
    assert Formatter("%m").format(msg) == msg.payload


def test_percent_escape_and_tab(msg):
    assert Formatter("100%%%T%c").format(msg) == "100%\t" + msg.name


def test_format_to_writes_and_returns_stream(msg):
    stream = io.StringIO()
    formatter = Formatter("[%p] %m%n")
    result = formatter.format_to(stream, msg)
    assert result is stream
    assert stream.getvalue() == formatter.format(msg)