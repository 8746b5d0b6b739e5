# gnmikit

Building blocks for gNMI telemetry, written in pure Python with no third-party dependencies:

- `gnmikit.messages` holds plain data classes for gNMI messages: `Path`, `PathElem`, `TypedValue` (with its `ValueKind`), `Decimal64`, `ScalarArray`, `Update`, `Notification`, `Subscription`, `SubscriptionList` (with its `SubscriptionMode`), `SubscribeRequest` and `SubscribeResponse`.
- `gnmikit.value` converts between Python scalars and `TypedValue`, and compares typed values.
- `gnmikit.stats` holds the subscription statistics records `TypeStats`, `TargetStats` and `ClientStats`, and `StatsRegistry`, a thread-safe store for them.
- `gnmikit.watch` defines the abstract `Watcher` interface and the `WatchUpdate` record for watching files.

## Installation

```
pip install gnmikit
```

## Converting values

```python
from gnmikit.value import from_scalar, to_scalar, equal

tv = from_scalar(500)        # TypedValue(kind=ValueKind.INT, value=500)
to_scalar(tv)                # 500
equal(tv, from_scalar(500))  # True
from_scalar(["a", 1])        # leaf-list holding a string value and an int value
```

`from_scalar` accepts `str`, `bool`, `int`, `float`, `bytes`-like objects, and lists or tuples of these.
Integers in the signed 64-bit range become int values. Larger integers, up to the unsigned 64-bit maximum, become uint values. Floats become double values.

`to_scalar` returns the native value. A decimal value comes back as a float rounded to single precision. JSON and JSON-IETF values are decoded, with integers read as floats, and wrapped in a `DeprecatedScalar`. Both functions raise `ScalarError`, a subclass of `ValueError`, when a value is not a scalar.

`equal` compares only primitive values and leaf-lists. It returns `False` for any other kind of value, for unset values and for `None`.

## Subscription statistics

```python
from gnmikit.stats import StatsRegistry

registry = StatsRegistry()
st = registry.target_stats("dev1")   # live record, created on first use
st.active_subscription_count += 1
st.subscription_count += 1
registry.all_target_stats()          # {'dev1': TargetStats(active_subscription_count=1, subscription_count=1)}
```

- `type_stats(typ)`, `target_stats(target)` and `client_stats(client, target)` return the live record for a name, creating it if needed.
- `all_type_stats()`, `all_target_stats()` and `all_client_stats()` return snapshot copies.
- `remove_client_stats(client)` forgets a client's record.

## Watching files

`Watcher` is an abstract base class. A backend implements `read()`, `add(path)`, `remove(path)` and `close()`. Every watcher can then be used as a context manager, which calls `close()` on exit, and can be iterated to get `WatchUpdate` records until `read()` raises. The package ships no concrete watcher.

## What this package does not do

gnmikit has no gRPC transport and no subscribe server. It does not receive subscription requests, match updates against subscriptions or stream responses. It also keeps no telemetry cache. It offers the message types, value conversion, statistics records and watcher interface that such a server would be built on.

## Running the tests

```
pip install -e .[test]
pytest
```