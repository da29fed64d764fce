import os
import time

from bitlog.util import create_directory, exists, now, parent_path


def test_now_is_current_epoch_seconds():
    before = int(time.time())
    value = now()
    after = int(time.time())
    assert before <= value <= after


def test_exists_for_present_and_missing(tmp_path):
    assert exists(str(tmp_path)) is True
    assert exists(str(tmp_path / "missing")) is False


def test_parent_path_without_separator_is_dot():
    assert parent_path("") == "."
    assert parent_path("sync.log") == "."


def test_parent_path_keeps_trailing_separator():
    assert parent_path("./logs/sync.log") == "./logs/"


def test_parent_path_is_prefix_ending_at_last_separator():
    for name in ("a/b/c.log", "a\\b.log", "/abs/dir/file", "x/y\\z"):
        result = parent_path(name)
        assert name.startswith(result)
        assert result[-1] in "/\\"
        rest = name[len(result):]
        assert "/" not in rest and "\\" not in rest


def test_create_directory_nested(tmp_path):
    target = tmp_path / "one" / "two" / "three"
    create_directory(str(target))
    assert target.is_dir()


def test_create_directory_with_trailing_separator(tmp_path):
    target = tmp_path / "alpha" / "beta"
    create_directory(str(target) + "/")
    assert target.is_dir()


def test_create_directory_relative_from_parent_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    directory = parent_path("./logs/roll-")
    assert directory == "./logs/"
    assert exists(directory) is False
    create_directory(directory)
    assert exists(directory) is True
    assert (tmp_path / "logs").is_dir()


def test_create_directory_empty_and_existing_are_noops(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    create_directory("")
    create_directory(str(tmp_path))
    assert os.listdir(tmp_path) == []