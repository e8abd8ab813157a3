"""Restartable one-shot timer modelled on a kernel timer_list."""

from __future__ import annotations

import threading
from typing import Callable, Optional


class Timer:
    """One-shot timer that can be re-armed, cancelled and synchronously stopped."""

    def __init__(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._modifying = threading.Lock()
        self._running = threading.Lock()
        self._pending = False
        self._generation = 0
        self._thread: Optional[threading.Timer] = None

    def _cancel_thread(self) -> None:
        self._generation += 1
        if self._thread is not None:
            self._thread.cancel()
            self._thread = None

    def _expire(self, generation: int) -> None:
        with self._running:
            with self._modifying:
                if not self._pending or generation != self._generation:
                    return
                self._pending = False
                self._thread = None
            self._callback()

    def mod(self, delay: float) -> None:
        """Arm the timer to fire after ``delay`` seconds, replacing any earlier arming."""
        with self._modifying:
            self._pending = True
            self._cancel_thread()
            thread = threading.Timer(delay, self._expire, args=(self._generation,))
            thread.daemon = True
            self._thread = thread
            thread.start()

    def delete(self) -> None:
        """Disarm the timer; a callback already running is not waited for."""
        with self._modifying:
            self._pending = False
            self._cancel_thread()

    def delete_sync(self) -> None:
        """Disarm the timer and wait for a running callback to finish."""
        self.delete()
        with self._running:
            self.delete()

    def is_pending(self) -> bool:
        """Whether the timer is armed and has not fired yet."""
        with self._modifying:
            return self._pending