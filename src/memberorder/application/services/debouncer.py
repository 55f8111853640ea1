"""Debouncer: coalesces bursts of calls per key into one delayed call."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable


class TimerProtocol(Protocol):
    """Subset of threading.Timer used by Debouncer."""

    def start(self) -> None:
        """Start the countdown."""
        ...

    def cancel(self) -> None:
        """Stop the countdown if it has not fired."""
        ...


def _thread_timer(interval: float, function: Callable[[], None]) -> TimerProtocol:
    """Daemon threading.Timer."""
    timer = threading.Timer(interval, function)
    timer.daemon = True
    return timer


class Debouncer:
    """Per-key delayed callbacks, restarted on every schedule().

    Scheduling a key that is already pending cancels the pending call and
    starts a new delay. A cancelled call never runs.

    The timer mechanism is injectable: the default uses daemon
    threading.Timer, tests and event-loop hosts pass their own factory.
    """

    def __init__(
        self,
        timer_factory: Callable[[float, Callable[[], None]], TimerProtocol] | None = None,
    ) -> None:
        """Initialize debouncer.

        Args:
            timer_factory: (delay seconds, callback) → unstarted timer.
                None = daemon threading.Timer.
        """
        self._timer_factory = timer_factory or _thread_timer
        self._timers: dict[str, TimerProtocol] = {}
        self._lock = threading.Lock()

    def schedule(self, key: str, delay: float, callback: Callable[[], None]) -> None:
        """Run callback after delay seconds unless key is rescheduled first.

        Args:
            key: Coalescing key (document uri)
            delay: Delay in seconds (>= 0)
            callback: Called with no arguments
        """
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")

        def fire() -> None:
            with self._lock:
                if self._timers.get(key) is not timer:
                    return
                del self._timers[key]
            callback()

        timer = self._timer_factory(delay, fire)
        with self._lock:
            previous = self._timers.pop(key, None)
            self._timers[key] = timer
        if previous is not None:
            previous.cancel()
        timer.start()

    def cancel(self, key: str) -> bool:
        """Cancel the pending call for key.

        Returns:
            True if a call was pending
        """
        with self._lock:
            timer = self._timers.pop(key, None)
        if timer is None:
            return False
        timer.cancel()
        return True

    def cancel_all(self) -> None:
        """Cancel every pending call."""
        with self._lock:
            timers = list(self._timers.values())
            self._timers.clear()
        for timer in timers:
            timer.cancel()

    def is_pending(self, key: str) -> bool:
        """Check if a call is pending for key."""
        with self._lock:
            return key in self._timers

    @property
    def pending_count(self) -> int:
        """Number of pending calls."""
        with self._lock:
            return len(self._timers)
