"""Per-address token bucket limiting handshake traffic."""

from __future__ import annotations

import ipaddress
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Union

PACKETS_PER_SECOND = 20
PACKETS_BURSTABLE = 5
GARBAGE_COLLECT_NANOS = 1_000_000_000
PACKET_COST = 1_000_000_000 // PACKETS_PER_SECOND
MAX_TOKENS = PACKET_COST * PACKETS_BURSTABLE

_COLLECT_INTERVAL = 1.0

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass
class _Entry:
    last_time: int
    tokens: int
    lock: threading.Lock = field(default_factory=threading.Lock)


class Ratelimiter:
    """Token bucket per source address.

    ``time_now`` returns the current time in nanoseconds. Entries idle for
    more than a second are removed by a background collector started by
    :meth:`init`.
    """

    def __init__(self, time_now: Optional[Callable[[], int]] = None) -> None:
        self.time_now: Callable[[], int] = time_now or time.monotonic_ns
        self._lock = threading.Lock()
        self._table: Optional[Dict[Address, _Entry]] = None
        self._stop: Optional[threading.Event] = None
        self._wake: Optional[threading.Event] = None

    def __enter__(self) -> "Ratelimiter":
        self.init()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def init(self) -> None:
        """Empty the table and (re)start the garbage collector."""
        with self._lock:
            self._signal_stop()
            stop = threading.Event()
            wake = threading.Event()
            self._stop, self._wake = stop, wake
            self._table = {}
        threading.Thread(
            target=self._collect, args=(stop, wake), daemon=True
        ).start()

    def close(self) -> None:
        """Stop the garbage collector."""
        with self._lock:
            self._signal_stop()

    def _signal_stop(self) -> None:
        if self._stop is not None:
            self._stop.set()
            self._wake.set()

    def _collect(self, stop: threading.Event, wake: threading.Event) -> None:
        while True:
            wake.wait()
            if stop.is_set():
                return
            wake.clear()
            while not stop.wait(_COLLECT_INTERVAL):
                if self.cleanup():
                    break
            else:
                return

    def cleanup(self) -> bool:
        """Drop stale entries; return whether the table is now empty."""
        with self._lock:
            if self._table is None:
                return True
            for key, entry in list(self._table.items()):
                with entry.lock:
                    if self.time_now() - entry.last_time > GARBAGE_COLLECT_NANOS:
                        del self._table[key]
            return not self._table

    def allow(self, ip: Union[str, int, bytes, Address]) -> bool:
        """Charge one packet to ``ip``; return whether it may pass."""
        key = ipaddress.ip_address(ip)
        with self._lock:
            if self._table is None:
                raise RuntimeError("ratelimiter is not initialised")
            entry = self._table.get(key)

        if entry is None:
            entry = _Entry(last_time=self.time_now(), tokens=MAX_TOKENS - PACKET_COST)
            with self._lock:
                self._table[key] = entry
                if len(self._table) == 1 and self._wake is not None:
                    self._wake.set()
            return True

        with entry.lock:
            now = self.time_now()
            entry.tokens = min(entry.tokens + now - entry.last_time, MAX_TOKENS)
            entry.last_time = now
            if entry.tokens > PACKET_COST:
                entry.tokens -= PACKET_COST
                return True
            return False