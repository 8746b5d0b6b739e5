from collections import deque
from itertools import islice

import pytest

from gnmikit.watch import Watcher, WatchUpdate


class FakeWatcher(Watcher):
    def __init__(self):
        self.paths = set()
        self.pending = deque()
        self.closed = False

    def read(self):
        if self.closed:
            raise RuntimeError("closed")
        if not self.pending:
            raise TimeoutError("no update")
        return self.pending.popleft()

    def add(self, path):
        if not self.closed:
            self.paths.add(path)

    def remove(self, path):
        self.paths.discard(path)

    def close(self):
        self.closed = True
        self.paths.clear()


def test_watcher_is_abstract():
    with pytest.raises(TypeError):
        Watcher()


def test_update_defaults():
    update = WatchUpdate("/etc/config")
    assert update.contents == b""
    assert update.err is None
    assert update.path == "/etc/config"


def test_update_carries_error():
    err = OSError("missing")
    update = WatchUpdate("/etc/config", err=err)
    assert update.err is err


def test_context_manager_closes():
    watcher = FakeWatcher()
    entered = watcher.__enter__()
    assert entered is watcher
    entered.add("/a")
    entered.pending.append(WatchUpdate("/a", b"data"))
    assert entered.read() == WatchUpdate("/a", b"data")
    assert entered.paths == {"/a"}
    watcher.__exit__(None, None, None)
    assert watcher.closed
    assert watcher.paths == set()


def test_iteration_yields_read_results():
    watcher = FakeWatcher()
    first = WatchUpdate("/a", b"one")
    second = WatchUpdate("/b", b"two")
    watcher.pending.extend([first, second])
    assert list(islice(watcher, 2)) == [first, second]


def test_iteration_stops_with_read_error():
    watcher = FakeWatcher()
    watcher.pending.append(WatchUpdate("/a", b"one"))
    it = iter(watcher)
    assert next(it).contents == b"one"
    with pytest.raises(TimeoutError):
        next(it)