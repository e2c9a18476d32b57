# expirycache

This is an in-memory key/value cache. Every entry expires after a set time. A
background garbage collector runs on a daemon thread and removes expired
entries at a fixed interval. All cache operations are safe to call from
several threads.

## Installation

```
pip install expirycache
```

## Usage

```python
from expirycache.model import Options, NotFoundError
from expirycache.storage import Cache

with Cache(Options(item_ttl=120.0, gc_interval=30.0)) as cache:
    cache.set("session", {"user": "alice"})
    cache.set_with_ttl("short-lived", 42, 0.5)

    print(cache.get("session"))      # {'user': 'alice'}
    print("session" in cache)        # True
    print(len(cache))                # 2 (counts expired entries not yet collected)

    try:
        cache.get("missing")
    except NotFoundError as err:
        print(err)                   # no cached entry: key: missing
```

All durations are in seconds. `Cache()` with no arguments uses the default
options.

### Options

`expirycache.model.Options` is a dataclass with two fields:

- `item_ttl` sets the default lifetime of an entry written with `set`.
- `gc_interval` sets how often the background collector removes expired entries.

`Options.validate()` replaces a zero value with its default. The default
lifetime is 120 seconds and the default interval is 30 seconds. A negative
value raises `InvalidConfigError`. The `Cache` constructor calls `validate()`
on the options you pass, so it fills in the defaults on that object.

### Errors

These errors are defined in `expirycache.model`. Each one derives from `CacheError`:

- `NotFoundError` is raised when no entry exists for the key. It is also a `LookupError`.
- `ExpiredItemError` is raised when the entry exists but has expired. The entry is removed before the error is raised. It is also a `LookupError`.
- `InvalidConfigError` is raised for negative option values. It is also a `ValueError`.

### Cache methods

| Method | Description |
| --- | --- |
| `set(key, value)` | Stores a value with the default lifetime. |
| `set_with_ttl(key, value, ttl)` | Stores a value with the lifetime you give. |
| `get(key)` | Returns the value. Raises `NotFoundError` or `ExpiredItemError`. |
| `delete(key)` | Removes one entry. Does nothing if the key is absent. |
| `clear()` | Removes all entries. |
| `keys()` | Returns a list of the keys whose entries have not expired. |
| `contains_key(key)` / `key in cache` | Returns whether an entry exists and has not expired. An expired entry is removed by the check. |
| `size()` / `len(cache)` | Returns the number of stored entries, including expired ones. |
| `close()` | Stops the background collector. Leaving a `with` block calls it for you. |

## Garbage collector

`expirycache.eviction.GarbageCollector(interval, cleanup)` calls `cleanup`
every `interval` seconds on a daemon thread. The `cleanup` function returns the
number of entries it removed. An interval of zero or less raises
`GarbageCollectorConfigError`, which is a `ValueError`. Call `start()` to begin
and `stop()` to end. `stop()` waits for the worker thread, and you can call it
more than once. `is_running()` tells you whether the worker is active.

The collector prints a status line to standard output when it starts, after
each run, and when it stops. If `cleanup` raises, the collector prints the
error and runs again at the next interval.

## Example

To run the bundled example, which stores a value and reads it back:

```
expirycache-example
```

It prints `bar 1`, along with the collector's start and stop messages.

## Limitations

Entries exist only in the memory of the process. Nothing is written to disk
or shared between processes. There is no limit on the number of entries and
no size-based eviction. Entries are removed only when they expire.