# pointer.py
"""
Turns host pointer signals into particle bursts and ripples.

Move signals are rate limited against loop time: a move is accepted only
if none was accepted before or at least `move_throttle_ms` have passed
since the last accepted one. Dropped moves are discarded outright, they
neither queue nor update the pointer position.
"""
import logging
from typing import Dict, Any, Optional, Tuple

from constants import DEFAULT_EFFECT_PARAMETERS, MOUSE_MOVE, CLICK
from event_loop import EventLoop
from particle import ParticleField
from ripple import RippleSet

# --- Data Contracts ---
#
# class PointerTracker:
#   - attach(self) -> None / detach(self) -> None:
#     - Side Effects: Subscribes / unsubscribes on_move and on_click to
#       the loop's "mousemove" and "click" signals. Both are idempotent.
#
#   - on_move(self, x: float, y: float) -> bool:
#     - Outputs: True if the signal was accepted.
#     - Side Effects: On accept, updates self.position and spawns one
#       particle burst at (x, y).
#
#   - on_click(self, x: float, y: float) -> None:
#     - Side Effects: Adds a ripple at (x, y).

class PointerTracker:
    """
    Listens for pointer signals and feeds the particle field and ripple set.
    """
    def __init__(self, loop: EventLoop, field: ParticleField, ripples: RippleSet,
                 params: Optional[Dict[str, Any]] = None):
        params = params if params is not None else {}
        self.loop = loop
        self.field = field
        self.ripples = ripples
        self.throttle_ms = float(params.get('move_throttle_ms', DEFAULT_EFFECT_PARAMETERS['move_throttle_ms']))
        if self.throttle_ms < 0:
            msg = f"Configuration error: move_throttle_ms must be non-negative, got {self.throttle_ms}."
            logging.critical(msg)
            raise ValueError(msg)

        self.position: Tuple[float, float] = (0.0, 0.0)
        self.last_accepted: Optional[float] = None
        self.accepted_moves = 0
        self.dropped_moves = 0
        self.attached = False

    def attach(self) -> None:
        if self.attached:
            return
        self.loop.add_listener(MOUSE_MOVE, self.on_move)
        self.loop.add_listener(CLICK, self.on_click)
        self.attached = True
        logging.debug("PointerTracker subscribed to pointer signals.")

    def detach(self) -> None:
        if not self.attached:
            return
        self.loop.remove_listener(MOUSE_MOVE, self.on_move)
        self.loop.remove_listener(CLICK, self.on_click)
        self.attached = False
        logging.debug("PointerTracker unsubscribed from pointer signals.")

    def on_move(self, x: float, y: float) -> bool:
        now = self.loop.now()
        if self.last_accepted is not None and now - self.last_accepted < self.throttle_ms:
            self.dropped_moves += 1
            return False
        self.last_accepted = now
        self.accepted_moves += 1
        self.position = (float(x), float(y))
        self.field.spawn_burst(x, y)
        return True

    def on_click(self, x: float, y: float) -> None:
        self.ripples.add(x, y)
