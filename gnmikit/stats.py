"""Per-type, per-target and per-client subscription statistics."""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace


@dataclass
class TypeStats:
    """Subscription counters for one subscribe mode (stream, once or poll)."""

    active_subscription_count: int = 0
    subscription_count: int = 0


@dataclass
class TargetStats:
    """Subscription counters for one target."""

    active_subscription_count: int = 0
    subscription_count: int = 0


@dataclass
class ClientStats:
    """Queue statistics for one subscribing client."""

    target: str = ""
    coalesce_count: int = 0
    queue_size: int = 0


class StatsRegistry:
    """Thread-safe store of live statistics records, keyed by name."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._types: dict[str, TypeStats] = {}
        self._targets: dict[str, TargetStats] = {}
        self._clients: dict[str, ClientStats] = {}

    def all_type_stats(self) -> dict[str, TypeStats]:
        """Return a snapshot copy of every type record."""
        with self._lock:
            return {name: replace(st) for name, st in self._types.items()}

    def all_target_stats(self) -> dict[str, TargetStats]:
        """Return a snapshot copy of every target record."""
        with self._lock:
            return {name: replace(st) for name, st in self._targets.items()}

    def all_client_stats(self) -> dict[str, ClientStats]:
        """Return a snapshot copy of every client record."""
        with self._lock:
            return {name: replace(st) for name, st in self._clients.items()}

    def type_stats(self, typ: str) -> TypeStats:
        """Return the live record for a subscribe type, creating it if needed."""
        with self._lock:
            return self._types.setdefault(typ, TypeStats())

    def target_stats(self, target: str) -> TargetStats:
        """Return the live record for a target, creating it if needed."""
        with self._lock:
            return self._targets.setdefault(target, TargetStats())

    def client_stats(self, client: str, target: str) -> ClientStats:
        """Return the live record for a client, creating it for target if needed."""
        with self._lock:
            st = self._clients.get(client)
            if st is None:
                st = self._clients[client] = ClientStats(target=target)
            return st

    def remove_client_stats(self, client: str) -> None:
        """Forget the record of a client; unknown clients are ignored."""
        with self._lock:
            self._clients.pop(client, None)