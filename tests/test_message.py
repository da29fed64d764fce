import threading
import time
from concurrent.futures import ThreadPoolExecutor

from bitlog.level import LogLevel
from bitlog.message import LogMsg


def test_fields_are_kept():
    msg = LogMsg("root", "main.py", 42, "hello", LogLevel.WARN)
    assert msg.name == "root"
    assert msg.file == "main.py"
    assert msg.line == 42
    assert msg.payload == "hello"
    assert msg.level is LogLevel.WARN


def test_ctime_is_taken_at_creation():
    before = int(time.time())
    msg = LogMsg("root", "f", 1, "p", LogLevel.INFO)
    after = int(time.time())
    assert before <= msg.ctime <= after


def test_tid_is_current_thread():
    msg = LogMsg("root", "f", 1, "p", LogLevel.INFO)
    assert msg.tid == threading.get_ident()


def test_tid_differs_between_threads():
    def make_in_worker():
        made = LogMsg("root", "f", 1, "p", LogLevel.INFO)
        return made, threading.get_ident()

    with ThreadPoolExecutor(max_workers=1) as executor:
        msg, worker_ident = executor.submit(make_in_worker).result()
    local = LogMsg("root", "f", 1, "p", LogLevel.INFO)
    assert msg.tid == worker_ident
    assert local.tid == threading.get_ident()
    assert msg.tid != local.tid
    assert msg.payload == "p"