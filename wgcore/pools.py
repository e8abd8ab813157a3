"""Object pool that caps how many items may be out at once."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Deque, Generic, TypeVar

T = TypeVar("T")


class WaitPool(Generic[T]):
    """Pool of reusable objects.

    When ``max_count`` is non-zero, :meth:`get` blocks while that many
    items are checked out. A ``max_count`` of zero means no limit.
    """

    def __init__(self, max_count: int, factory: Callable[[], T]) -> None:
        if max_count < 0:
            raise ValueError("max_count must not be negative")
        self.max_count = max_count
        self._factory = factory
        self._free: Deque[T] = deque()
        self._cond = threading.Condition()
        self._count = 0

    @property
    def count(self) -> int:
        """Number of items currently checked out (tracked only with a limit)."""
        with self._cond:
            return self._count

    def get(self) -> T:
        """Take an item, waiting for one to be returned if at the limit."""
        if self.max_count:
            with self._cond:
                while self._count >= self.max_count:
                    self._cond.wait()
                self._count += 1
        try:
            return self._free.pop()
        except IndexError:
            return self._factory()

    def put(self, item: T) -> None:
        """Return an item to the pool and wake one waiter."""
        self._free.append(item)
        if not self.max_count:
            return
        with self._cond:
            if self._count == 0:
                raise RuntimeError("put without a matching get")
            self._count -= 1
            self._cond.notify()