"""Interface for watching files for raw content changes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class WatchUpdate:
    """Contents of a watched file, or the path-specific error reading it.

    The path may name a single file within a watched path that fans out to
    several files.
    """

    path: str
    contents: bytes = b""
    err: Exception | None = None


class Watcher(ABC):
    """Watches files at given paths for changes; path format is backend-specific."""

    @abstractmethod
    def read(self) -> WatchUpdate:
        """Block until the next update for a file and return it.

        Several updates to one file between calls are coalesced into the
        latest. Raises when the watcher cannot read any more; such an error
        may mean a new watcher must be created.
        """

    @abstractmethod
    def add(self, path: str) -> None:
        """Start monitoring another path; has no effect after close()."""

    @abstractmethod
    def remove(self, path: str) -> None:
        """Stop monitoring a path given in the same form it was added."""

    @abstractmethod
    def close(self) -> None:
        """Stop watching all files and release resources."""

    def __enter__(self) -> Watcher:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[WatchUpdate]:
        """Yield updates as read() returns them, until read() raises."""
        while True:
            yield self.read()