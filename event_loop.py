# event_loop.py
"""
A single-threaded, virtual-time host event loop.

The loop owns a millisecond clock, a registry of signal listeners, and a
heap of one-shot and fixed-interval timers. Nothing runs concurrently:
every listener and timer callback runs to completion before the next one
starts, and time only moves when `advance` or `advance_to` is called. At
runtime the frame loop drives it from pygame's tick counter; in tests it
is advanced by hand.
"""
import heapq
import itertools
import logging
from typing import Any, Callable, Dict, List, Optional

# --- Data Contracts ---
#
# class EventLoop:
#   - __init__(self, start_ms: float = 0.0)
#   - now(self) -> float: current loop time in milliseconds.
#   - add_listener(kind, callback) / remove_listener(kind, callback)
#   - dispatch(kind, *args) -> int: number of listeners invoked.
#   - set_timeout(callback, delay_ms) -> Timer
#   - set_interval(callback, period_ms) -> Timer
#   - clear_timer(timer) -> None
#   - advance(ms) / advance_to(t) -> int: number of callbacks fired.
#     - Invariants: timers fire in (due time, creation order). While a
#       callback runs, now() equals its due time. Time never moves
#       backwards.


class Timer:
    """A scheduled callback. Interval timers carry a positive period."""
    __slots__ = ("callback", "due", "period", "seq", "cancelled")

    def __init__(self, callback: Callable[[], Any], due: float, period: Optional[float], seq: int):
        self.callback = callback
        self.due = due
        self.period = period
        self.seq = seq
        self.cancelled = False

    def __lt__(self, other: "Timer") -> bool:
        return (self.due, self.seq) < (other.due, other.seq)

    def __repr__(self) -> str:
        kind = "interval" if self.period is not None else "timeout"
        return f"Timer({kind}, due={self.due}, cancelled={self.cancelled})"


class EventLoop:
    """
    Virtual-time clock with signal listeners and a timer heap.
    """
    def __init__(self, start_ms: float = 0.0):
        self._now = float(start_ms)
        self._timers: List[Timer] = []
        self._listeners: Dict[str, List[Callable[..., Any]]] = {}
        self._seq = itertools.count()
        logging.debug(f"EventLoop created at t={self._now:.1f}ms.")

    def now(self) -> float:
        return self._now

    @property
    def pending_timers(self) -> int:
        return sum(1 for timer in self._timers if not timer.cancelled)

    # --- Signals ---

    def add_listener(self, kind: str, callback: Callable[..., Any]) -> None:
        self._listeners.setdefault(kind, []).append(callback)

    def remove_listener(self, kind: str, callback: Callable[..., Any]) -> None:
        """Unsubscribes a listener. Unknown listeners are ignored."""
        listeners = self._listeners.get(kind, [])
        if callback in listeners:
            listeners.remove(callback)

    def listener_count(self, kind: str) -> int:
        return len(self._listeners.get(kind, []))

    def dispatch(self, kind: str, *args: Any) -> int:
        """Delivers a signal to every listener of `kind`, in subscription order."""
        # Copy so a listener may unsubscribe while being dispatched.
        listeners = list(self._listeners.get(kind, []))
        for callback in listeners:
            callback(*args)
        return len(listeners)

    # --- Timers ---

    def set_timeout(self, callback: Callable[[], Any], delay_ms: float) -> Timer:
        if delay_ms < 0:
            raise ValueError(f"Timeout delay must be non-negative, got {delay_ms}.")
        return self._schedule(callback, self._now + delay_ms, None)

    def set_interval(self, callback: Callable[[], Any], period_ms: float) -> Timer:
        if period_ms <= 0:
            raise ValueError(f"Interval period must be positive, got {period_ms}.")
        return self._schedule(callback, self._now + period_ms, float(period_ms))

    def clear_timer(self, timer: Timer) -> None:
        """Cancels a timer. Clearing an already fired or cleared timer is a no-op."""
        timer.cancelled = True

    def _schedule(self, callback: Callable[[], Any], due: float, period: Optional[float]) -> Timer:
        timer = Timer(callback, due, period, next(self._seq))
        heapq.heappush(self._timers, timer)
        return timer

    # --- Time ---

    def advance(self, ms: float) -> int:
        return self.advance_to(self._now + ms)

    def advance_to(self, target_ms: float) -> int:
        """
        Moves the clock to `target_ms`, firing every timer due on the way.

        Returns:
            int: The number of callbacks that ran.
        """
        if target_ms < self._now:
            raise ValueError(
                f"Cannot move loop time backwards ({self._now:.1f}ms -> {target_ms:.1f}ms)."
            )
        fired = 0
        while self._timers and self._timers[0].due <= target_ms:
            timer = heapq.heappop(self._timers)
            if timer.cancelled:
                continue
            self._now = timer.due
            if timer.period is not None:
                timer.due += timer.period
                timer.seq = next(self._seq)
                heapq.heappush(self._timers, timer)
            else:
                timer.cancelled = True
            timer.callback()
            fired += 1
        self._now = float(target_ms)
        return fired
