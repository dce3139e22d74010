# page.py
"""
The maintenance page: single owner of all effect state.

A MaintenancePage wires the particle field, physics tick, ripple set and
pointer tracker onto one event loop. `mount` subscribes to pointer
signals and starts the fixed-interval physics clock; `unmount` releases
both and cancels any ripple removals still pending.
"""
import logging
from typing import Dict, Any, Optional

from constants import DEFAULT_EFFECT_PARAMETERS
from event_loop import EventLoop, Timer
from particle import ParticleField
from pointer import PointerTracker
from ripple import RippleSet
from scene import Scene, build_scene
from simulation import Simulation


class MaintenancePage:
    """
    Owns the pointer tracker, particle field and ripple set for the page lifetime.
    """
    def __init__(self, loop: EventLoop, params: Optional[Dict[str, Any]] = None):
        params = params if params is not None else {}
        self.loop = loop
        self.tick_interval_ms = float(params.get('tick_interval_ms', DEFAULT_EFFECT_PARAMETERS['tick_interval_ms']))

        self.field = ParticleField(params)
        self.simulation = Simulation(self.field, params)
        self.ripples = RippleSet(loop, params)
        self.tracker = PointerTracker(loop, self.field, self.ripples, params)

        self._tick_timer: Optional[Timer] = None
        logging.info("MaintenancePage created.")

    @property
    def mounted(self) -> bool:
        return self._tick_timer is not None

    def mount(self) -> None:
        if self.mounted:
            return
        self.tracker.attach()
        self._tick_timer = self.loop.set_interval(self.simulation.step, self.tick_interval_ms)
        logging.info(f"MaintenancePage mounted; physics tick every {self.tick_interval_ms:.0f}ms.")

    def unmount(self) -> None:
        if not self.mounted:
            return
        self.tracker.detach()
        self.loop.clear_timer(self._tick_timer)
        self._tick_timer = None
        cancelled = self.ripples.cancel_pending()
        logging.info(f"MaintenancePage unmounted; cancelled {cancelled} pending ripple removals.")

    def scene(self) -> Scene:
        return build_scene(self.tracker.position, self.field, self.ripples)

    def stats(self) -> Dict[str, Any]:
        return {
            "particles": len(self.field),
            "ripples": len(self.ripples),
            "ticks": self.simulation.tick_count,
            "accepted_moves": self.tracker.accepted_moves,
            "dropped_moves": self.tracker.dropped_moves,
        }
