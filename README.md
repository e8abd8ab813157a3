# wgcore

`wgcore` holds self-contained building blocks of a userspace WireGuard-style
tunnel: counter replay protection, handshake rate limiting, TAI64N
timestamps, restartable timers, a bounded object pool, transport payload
padding and short peer labels. It needs only the Python standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module               | Purpose                                                              |
|----------------------|----------------------------------------------------------------------|
| `wgcore.replay`      | `Filter`, a sliding-window anti-replay filter for message counters   |
| `wgcore.ratelimiter` | `Ratelimiter`, a per-address token bucket                            |
| `wgcore.tai64n`      | `Timestamp`, `stamp()` and `now()` for whitened TAI64N timestamps    |
| `wgcore.pools`       | `WaitPool`, an object pool that blocks once too many items are out   |
| `wgcore.timers`      | `Timer`, a restartable one-shot timer with pending-state tracking    |
| `wgcore.padding`     | `calculate_padding_size` and the queue size constants                |
| `wgcore.peerlabel`   | `peer_label`, the short `peer(abcd…wxyz)` form of a public key       |

## Examples

### Rejecting replayed counters

```python
from wgcore.replay import Filter, WINDOW_SIZE

window = Filter()
limit = 2**64 - 2**13 - 1

window.validate_counter(0, limit)      # True, first sight of counter 0
window.validate_counter(0, limit)      # False, a replay
window.validate_counter(limit, limit)  # False, at or over the limit
window.reset()
```

Counters more than `WINDOW_SIZE` behind the highest one seen are rejected.
A `Filter` is not thread safe.

### Rate limiting per source address

```python
from wgcore.ratelimiter import Ratelimiter

with Ratelimiter() as limiter:          # init() on entry, close() on exit
    limiter.allow("192.0.2.1")          # True
```

`Ratelimiter` takes an optional `time_now` callable returning nanoseconds
(default `time.monotonic_ns`). `allow` accepts anything
`ipaddress.ip_address` does. A fresh address may send a burst of five
packets; after that tokens refill at twenty packets per second. `init()`
starts a background thread that drops entries idle for more than a second;
`cleanup()` does the same on demand and returns whether the table is empty.
Calling `allow` before `init` raises `RuntimeError`.

### Timestamps

```python
from wgcore.tai64n import now, stamp

earlier = stamp(1_000_000_000)   # nanoseconds since the Unix epoch
later = now()
later.after(earlier)             # True
bytes(later)                     # the 12-byte big-endian label
print(earlier)                   # 1970-01-01 00:00:01 +0000 UTC
```

The low 24 bits of the nanosecond field are cleared, so two stamps taken
within about 16 ms of each other may compare equal.

### Timers

```python
from wgcore.timers import Timer

timer = Timer(lambda: print("expired"))
timer.mod(0.5)          # fire in half a second
timer.is_pending()      # True
timer.delete_sync()     # disarm and wait for a running callback
```

`mod` re-arms a timer that is already pending; `delete` disarms it without
waiting.

### Object pool

```python
from wgcore.pools import WaitPool

pool = WaitPool(2, lambda: bytearray(2048))
buf = pool.get()
pool.put(buf)
```

With a non-zero limit, `get` blocks while that many items are checked out;
a limit of zero means no limit. Putting back more than was taken raises
`RuntimeError`.

### Padding and peer labels

```python
from wgcore.padding import calculate_padding_size
from wgcore.peerlabel import peer_label

calculate_padding_size(1, 1420)   # 15: payloads are padded to a multiple of 16
calculate_padding_size(0, 1420)   # 0
peer_label(bytes(32))             # 'peer(AAAA…AAAA)'
```

`peer_label` raises `ValueError` unless the key is exactly 32 bytes.

## What this package does not do

`wgcore` is a library of parts, not a running tunnel. It has no command to
start, creates no network interface, performs no handshake or encryption,
and opens no control socket: it does not read or write the `key=value`
configuration protocol, and it has no listener for configuration requests.