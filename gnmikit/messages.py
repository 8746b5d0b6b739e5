"""gNMI message types used by the value helpers and the subscribe server."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any


class ValueKind(Enum):
    """Which member of the TypedValue oneof is set."""

    STRING = "string_val"
    INT = "int_val"
    UINT = "uint_val"
    BOOL = "bool_val"
    BYTES = "bytes_val"
    FLOAT = "float_val"
    DOUBLE = "double_val"
    DECIMAL = "decimal_val"
    LEAFLIST = "leaflist_val"
    ANY = "any_val"
    JSON = "json_val"
    JSON_IETF = "json_ietf_val"
    ASCII = "ascii_val"
    PROTO_BYTES = "proto_bytes"


@dataclass
class PathElem:
    """One element of a structured path, with optional list keys."""

    name: str = ""
    key: dict[str, str] = field(default_factory=dict)


@dataclass
class Path:
    """A gNMI path with target, origin and elements."""

    target: str = ""
    origin: str = ""
    element: list[str] = field(default_factory=list)
    elem: list[PathElem] = field(default_factory=list)


@dataclass
class Decimal64:
    """A decimal number: digits scaled down by 10**precision."""

    digits: int = 0
    precision: int = 0


@dataclass
class ScalarArray:
    """An ordered list of scalar TypedValues."""

    element: list[TypedValue] = field(default_factory=list)


@dataclass
class TypedValue:
    """A value with an explicit kind; both are None when unset."""

    kind: ValueKind | None = None
    value: Any = None

    def __post_init__(self) -> None:
        if self.kind is None and self.value is not None:
            raise ValueError("a TypedValue with a value must have a kind")
        if self.kind is ValueKind.LEAFLIST and not isinstance(self.value, (ScalarArray, type(None))):
            raise TypeError("a leaf-list value must be a ScalarArray")
        if self.kind is ValueKind.DECIMAL and not isinstance(self.value, (Decimal64, type(None))):
            raise TypeError("a decimal value must be a Decimal64")


@dataclass
class Update:
    """A path and the value it takes."""

    path: Path | None = None
    val: TypedValue | None = None
    duplicates: int = 0


@dataclass
class Notification:
    """A timestamped set of updates and deletes under a prefix."""

    timestamp: int = 0
    prefix: Path | None = None
    update: list[Update] = field(default_factory=list)
    delete: list[Path] = field(default_factory=list)
    atomic: bool = False


class SubscriptionMode(IntEnum):
    """Mode of a subscription list."""

    STREAM = 0
    ONCE = 1
    POLL = 2


@dataclass
class Subscription:
    """A single subscribed path."""

    path: Path | None = None


@dataclass
class SubscriptionList:
    """A set of subscriptions sharing a prefix and a mode."""

    prefix: Path | None = None
    subscription: list[Subscription] = field(default_factory=list)
    mode: SubscriptionMode = SubscriptionMode.STREAM
    updates_only: bool = False


@dataclass
class SubscribeRequest:
    """A client request: either a subscription list or a poll trigger."""

    subscribe: SubscriptionList | None = None
    poll: bool = False

    def __post_init__(self) -> None:
        if self.subscribe is not None and self.poll:
            raise ValueError("a request carries either a subscription or a poll, not both")


@dataclass
class SubscribeResponse:
    """A server response: either a notification or a sync marker."""

    update: Notification | None = None
    sync_response: bool = False

    def __post_init__(self) -> None:
        if self.update is not None and self.sync_response:
            raise ValueError("a response carries either an update or a sync, not both")