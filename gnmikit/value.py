"""Conversions between native Python values and TypedValue messages."""

from __future__ import annotations

import json
import math
import struct
from dataclasses import dataclass
from typing import Any

from .messages import ScalarArray, TypedValue, ValueKind

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1

_SIMPLE_KINDS = frozenset(
    {
        ValueKind.STRING,
        ValueKind.INT,
        ValueKind.UINT,
        ValueKind.BOOL,
        ValueKind.BYTES,
        ValueKind.DOUBLE,
        ValueKind.FLOAT,
        ValueKind.DECIMAL,
    }
)


class ScalarError(ValueError):
    """Raised when a value cannot be converted to or from a scalar."""


@dataclass
class DeprecatedScalar:
    """Wraps a value decoded from a deprecated JSON encoding."""

    message: str
    value: Any


def from_scalar(value: Any) -> TypedValue:
    """Convert a native scalar (or a list of scalars) to a TypedValue.

    Integers within the signed 64-bit range become int values; larger ones up
    to the unsigned 64-bit maximum become uint values.
    """
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ScalarError(f"string {value!r} contains non-UTF-8 bytes") from exc
        return TypedValue(ValueKind.STRING, value)
    if isinstance(value, bool):
        return TypedValue(ValueKind.BOOL, value)
    if isinstance(value, int):
        if _INT64_MIN <= value <= _INT64_MAX:
            return TypedValue(ValueKind.INT, int(value))
        if _INT64_MAX < value <= _UINT64_MAX:
            return TypedValue(ValueKind.UINT, int(value))
        raise ScalarError(f"integer {value} does not fit in 64 bits")
    if isinstance(value, float):
        return TypedValue(ValueKind.DOUBLE, value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return TypedValue(ValueKind.BYTES, bytes(value))
    if isinstance(value, (list, tuple)):
        elements = []
        for item in value:
            try:
                elements.append(from_scalar(item))
            except ScalarError as exc:
                raise ScalarError(f"in list: {exc}") from exc
        return TypedValue(ValueKind.LEAFLIST, ScalarArray(elements))
    raise ScalarError(f"non-scalar type {value!r}")


def _to_float32(x: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def _decode_json(raw: bytes) -> Any:
    try:
        return json.loads(raw, parse_int=float)
    except (ValueError, TypeError) as exc:
        raise ScalarError(f"invalid JSON value: {exc}") from exc


def to_scalar(tv: TypedValue | None) -> Any:
    """Convert a scalar TypedValue to a native Python value."""
    kind = tv.kind if tv is not None else None
    if kind is ValueKind.DECIMAL:
        d = tv.value
        return _to_float32(d.digits / 10**d.precision)
    if kind in (
        ValueKind.STRING,
        ValueKind.INT,
        ValueKind.UINT,
        ValueKind.BOOL,
        ValueKind.FLOAT,
        ValueKind.DOUBLE,
        ValueKind.BYTES,
    ):
        return tv.value
    if kind is ValueKind.LEAFLIST:
        elements = tv.value.element if tv.value is not None else []
        result = []
        for element in elements:
            try:
                result.append(to_scalar(element))
            except ScalarError as exc:
                raise ScalarError(f"to_scalar for ScalarArray {element.value!r}: {exc}") from exc
        return result
    if kind is ValueKind.JSON:
        return DeprecatedScalar("Deprecated TypedValue_JsonVal", _decode_json(tv.value or b""))
    if kind is ValueKind.JSON_IETF:
        return DeprecatedScalar("Deprecated TypedValue_JsonIetfVal", _decode_json(tv.value or b""))
    raise ScalarError(f"non-scalar type {tv.value if tv is not None else None!r}")


def equal(a: TypedValue | None, b: TypedValue | None) -> bool:
    """Report whether two primitive or leaf-list values are the same.

    Values of any other kind, and unset values, never compare equal.
    """
    if a is None or b is None or a.kind != b.kind:
        return False
    if a.kind in _SIMPLE_KINDS:
        return a.value == b.value
    if a.kind is ValueKind.LEAFLIST:
        ae = a.value.element if a.value is not None else []
        be = b.value.element if b.value is not None else []
        return len(ae) == len(be) and all(equal(x, y) for x, y in zip(ae, be))
    return False