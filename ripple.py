# ripple.py
"""
Tracks the transient ripple markers left by clicks.

Each ripple lives for a fixed duration of loop time. Its removal is a
one-shot timer on the event loop, so a ripple created at T is present
for every query in [T, T + duration) and gone from T + duration on.
"""
import logging
from typing import Dict, Any, List, NamedTuple, Optional

from constants import DEFAULT_EFFECT_PARAMETERS
from event_loop import EventLoop, Timer


class Ripple(NamedTuple):
    id: int
    x: float
    y: float
    created_at: float


class RippleSet:
    """
    Ordered collection of live ripples with timed self-removal.
    """
    def __init__(self, loop: EventLoop, params: Optional[Dict[str, Any]] = None):
        params = params if params is not None else {}
        self.loop = loop
        self.duration_ms = float(params.get('ripple_duration_ms', DEFAULT_EFFECT_PARAMETERS['ripple_duration_ms']))
        if self.duration_ms <= 0:
            msg = f"Configuration error: ripple_duration_ms must be positive, got {self.duration_ms}."
            logging.critical(msg)
            raise ValueError(msg)
        self.ripples: List[Ripple] = []
        self.next_id = 0
        self._pending: Dict[int, Timer] = {}
        logging.info(f"RippleSet initialized: ripples last {self.duration_ms:.0f}ms.")

    def __len__(self) -> int:
        return len(self.ripples)

    def __iter__(self):
        return iter(self.ripples)

    def add(self, x: float, y: float) -> Ripple:
        """Creates a ripple at (x, y) and schedules its removal."""
        ripple = Ripple(self.next_id, float(x), float(y), self.loop.now())
        self.next_id += 1
        self.ripples.append(ripple)
        self._pending[ripple.id] = self.loop.set_timeout(
            lambda: self.remove(ripple.id), self.duration_ms
        )
        logging.debug(f"Ripple {ripple.id} created at ({ripple.x:.0f}, {ripple.y:.0f}).")
        return ripple

    def remove(self, ripple_id: int) -> None:
        """Removes a ripple by id. Removing an absent ripple is a no-op."""
        self._pending.pop(ripple_id, None)
        self.ripples = [r for r in self.ripples if r.id != ripple_id]

    def cancel_pending(self) -> int:
        """
        Cancels every outstanding removal timer.

        Returns:
            int: The number of timers cancelled.
        """
        count = len(self._pending)
        for timer in self._pending.values():
            self.loop.clear_timer(timer)
        self._pending.clear()
        return count
