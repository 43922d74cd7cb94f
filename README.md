# faultmgr

Building blocks of a diagnostic fault manager: counting operation cycles,
tracking enabling conditions, holding fault catalogs, and presenting fault
state in an ISO 14229 / SOVD shape: DTC status flags and mask byte, fault
codes and ISO 8601 timestamps. The package has no runtime dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `faultmgr.operation_cycle`

- `OperationCycleTracker` counts named cycles such as "power", "ignition"
  or "drive". `increment(name)` returns the new count. `get(name)` returns 0
  for a cycle it has never seen. `snapshot()` returns a copy of all counters.
  `apply_events(events)` increments the counter on `CycleEventType.START` and
  `RESTART`, leaves it unchanged on `STOP`, and returns the names it
  incremented.
- `OperationCycleEvent` is a frozen dataclass with `cycle_id`, `event_type`,
  `source` (a `CycleSource`: `ECU`, `HPC` or `MANUAL`) and a UTC `timestamp`.
- `OperationCycleProvider` is the abstract source of events. Subclasses
  implement `poll()`. `current_cycle(name)` returns `None` unless the provider
  keeps running totals.
- `ManualCycleProvider` holds an in-memory queue of events. You add to it
  with `push(event)`, `start_cycle(name)` and `stop_cycle(name)`. `poll()`
  drains the queue, so a second call with nothing new returns an empty list.

### `faultmgr.enabling_condition_registry`

`EnablingConditionRegistry` records an `EnablingConditionStatus` (`INACTIVE`
or `ACTIVE`) for each entity name.

- `register(entity)` starts a new condition as `INACTIVE`. For a condition
  already registered it returns the current status and changes nothing.
- `update_status(entity, status)` returns the new status when it changed and
  `None` when it did not. An unknown entity is registered with the given
  status.
- `get_status(entity)` returns the status, or `None` for an unknown entity.
- `all_conditions()` returns a read-only mapping of all conditions.
- `len(registry)` is the number of conditions.

### `faultmgr.catalog_registry`

`FaultCatalogRegistry(entries)` keys catalog objects by their `id`
attribute. When two entries share an id, the later one replaces the earlier
one and a warning is logged. The registry supports `get(path)`, `in` and
`len()`.

### `faultmgr.sovd_status`

- `SovdFaultStatus` holds the eight ISO 14229 DTC status flags, each of which
  may be `None`, plus an optional `mask` string.
  - `compute_mask()` packs the flags into the status byte, counting unset
    flags as false.
  - `to_hash_map()` returns the flags that are set, keyed by wire name (for
    example `testFailed` or `confirmedDTC`), with values `"0"` or `"1"`, and
    includes `mask` when it is set.
  - `SovdFaultStatus.from_state(state)` builds a fully populated status from
    any object that has the eight flags as attributes, and fills in `mask`.
- `format_mask(mask)` formats a status byte as `0xNN`.
- `SovdFault` is a dataclass holding a fault record as it is reported to
  diagnostic tools.

### `faultmgr.fault_codes`

A fault identifier is an `int` (numeric, 32-bit), `bytes` of length 16 (a
UUID) or a `str` (text).

- `fault_id_to_code(fault_id)` converts an identifier to a code: `0x` plus
  upper-case hex for a numeric id, 8-4-4-4-12 lower-case hex for a UUID, and
  the text itself for a text id.
- `fault_id_from_code(code)` converts a code back to an identifier. It raises
  `BadArgumentError` for invalid hex after `0x`, for values beyond 32 bits,
  and for text longer than 64 bytes. A 36-character code with four dashes
  that does not hold valid hex is treated as text.
- `parse_uuid_string(text)` returns 16 bytes, or `None`.

### `faultmgr.timestamps`

- `format_unix_timestamp(secs)` writes `YYYY-MM-DDThh:mm:ssZ`. Instants after
  9999-12-31T23:59:59Z are clamped to it, and negative input raises
  `ValueError`.
- `parse_iso_timestamp(text)` reads that exact form back. It returns 0 for
  `None`, malformed input, out-of-range fields and dates before 1970.
- `civil_from_days` and `days_from_civil` convert between days since the
  epoch and calendar dates.

### `faultmgr.ipc_conversion`

These functions give strings and environment data their fixed-size transport
form.

- `short_str` truncates a string to 64 bytes of UTF-8 and `long_str` to
  128 bytes. Truncation happens at a character boundary and logs a warning.
- `env_data_to_ipc(env)` returns at most 8 `(key, value)` pairs, with keys and
  values truncated as short strings.
- `ipc_env_data_to_sovd(pairs)` turns such pairs back into a dict.

### `faultmgr.errors`

`SovdError` is the base class of `BadArgumentError` ("bad argument"),
`NotFoundError` ("not found") and `StorageError(message)` ("storage error:
<message>"). Two errors compare equal when they have the same class and the
same arguments.

## Examples

```python
from faultmgr.operation_cycle import ManualCycleProvider, OperationCycleTracker

provider = ManualCycleProvider()
provider.start_cycle("power")
provider.stop_cycle("power")
provider.start_cycle("ignition")

tracker = OperationCycleTracker()
tracker.apply_events(provider.poll())
assert tracker.get("power") == 1
assert tracker.get("ignition") == 1
```

```python
from faultmgr.timestamps import format_unix_timestamp, parse_iso_timestamp

assert format_unix_timestamp(1705312200) == "2024-01-15T09:50:00Z"
assert parse_iso_timestamp("2024-01-15T09:50:00Z") == 1705312200
```

```python
from faultmgr.fault_codes import fault_id_from_code, fault_id_to_code

assert fault_id_to_code(0x1001) == "0x1001"
assert fault_id_from_code("0x2A") == 0x2A
```

## What the package does not do

The package is a library of parts. It does not provide:

- a transport for receiving fault reports or publishing notifications;
- a store for fault state;
- processing of incoming fault records, such as debouncing or aging;
- a query or clear service;
- a command-line program.

A program that needs any of these has to provide it and use these modules
for the logic they cover.