"""TAI64N timestamps with whitened sub-second precision."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

TIMESTAMP_SIZE = 12
BASE = 0x400000000000000A
WHITENER_MASK = 0x1000000 - 1

_NANOS_PER_SECOND = 1_000_000_000
_U64 = 1 << 64
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, order=True)
class Timestamp:
    """A 12-byte TAI64N label: 8 bytes of seconds, 4 of nanoseconds, big-endian."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != TIMESTAMP_SIZE:
            raise ValueError(
                f"timestamp must be {TIMESTAMP_SIZE} bytes, got {len(self.value)}"
            )

    def __bytes__(self) -> bytes:
        return self.value

    def after(self, other: "Timestamp") -> bool:
        """Whether this timestamp is strictly later than ``other``."""
        return self.value > other.value

    def __str__(self) -> str:
        secs = (int.from_bytes(self.value[:8], "big") - BASE) % _U64
        if secs >= _U64 // 2:
            secs -= _U64
        nanos = int.from_bytes(self.value[8:], "big")
        extra, nanos = divmod(nanos, _NANOS_PER_SECOND)
        moment = _EPOCH + timedelta(seconds=secs + extra)
        text = moment.strftime("%Y-%m-%d %H:%M:%S")
        if nanos:
            text += "." + f"{nanos:09d}".rstrip("0")
        return text + " +0000 UTC"


def stamp(unix_nanos: int) -> Timestamp:
    """Build a timestamp from nanoseconds since the Unix epoch."""
    secs, nanos = divmod(unix_nanos, _NANOS_PER_SECOND)
    secs_field = (BASE + secs) % _U64
    nanos_field = nanos & ~WHITENER_MASK & 0xFFFFFFFF
    return Timestamp(secs_field.to_bytes(8, "big") + nanos_field.to_bytes(4, "big"))


def now() -> Timestamp:
    """The current time as a timestamp."""
    return stamp(time.time_ns())