import time
from unittest import mock

import pytest

from bitlog.sink import FileSink, LogSink, RollSink, StdoutSink, create_sink


def _struct(sec):
    return time.struct_time((2024, 3, 5, 7, 8, sec, 1, 65, 0))


def test_log_sink_is_abstract():
    with pytest.raises(TypeError):
        LogSink()


def test_stdout_sink_writes(capsys):
    sink = StdoutSink()
    sink.log(b"hello sink\n")
    assert capsys.readouterr().out == "hello sink\n"


def test_file_sink_creates_directories_and_appends(tmp_path):
    target = tmp_path / "a" / "b" / "out.log"
    with FileSink(str(target)) as sink:
        assert sink.file == str(target)
        sink.log(b"first\n")
        sink.log("second\n")
    assert target.read_bytes() == b"first\nsecond\n"
    with FileSink(str(target)) as sink:
        sink.log(b"third\n")
    assert target.read_bytes() == b"first\nsecond\nthird\n"


def test_file_sink_closed_raises(tmp_path):
    sink = FileSink(str(tmp_path / "x.log"))
    sink.close()
    with pytest.raises(ValueError):
        sink.log(b"late")


def test_roll_sink_filename(tmp_path):
    base = str(tmp_path / "logs" / "roll-")
    with mock.patch("bitlog.sink.time.localtime", return_value=_struct(9)):
        with RollSink(base, 1024) as sink:
            sink.log(b"data")
            name = sink.current_file
    assert name == base + "202435789.log"
    assert (tmp_path / "logs" / "roll-202435789.log").read_bytes() == b"data"


def test_roll_sink_rolls_over(tmp_path):
    base = str(tmp_path / "roll-")
    times = [_struct(9), _struct(10)]
    with mock.patch("bitlog.sink.time.localtime", side_effect=times):
        with RollSink(base, 10) as sink:
            sink.log(b"0123456789")
            first = sink.current_file
            sink.log(b"abc")
            second = sink.current_file
    assert first != second
    assert open(first, "rb").read() == b"0123456789"
    assert open(second, "rb").read() == b"abc"
    assert second == base + "2024357810.log"


def test_roll_sink_same_second_appends(tmp_path):
    base = str(tmp_path / "roll-")
    with mock.patch("bitlog.sink.time.localtime", return_value=_struct(9)):
        with RollSink(base, 4) as sink:
            for chunk in (b"aaaa", b"bbbb", b"cc"):
                sink.log(chunk)
            name = sink.current_file
    assert open(name, "rb").read() == b"aaaabbbbcc"
    assert len(list(tmp_path.iterdir())) == 1


def test_create_sink_builds_file_sink(tmp_path):
    target = tmp_path / "made.log"
    sink = create_sink(FileSink, str(target))
    try:
        assert isinstance(sink, FileSink) and sink.file == str(target)
        sink.log(b"x")
    finally:
        sink.close()
    assert target.read_bytes() == b"x"


def test_create_sink_rejects_non_sink():
    with pytest.raises(TypeError):
        create_sink(dict)