# particle.py
"""
Manages the state of all particles on the page.

This module defines the ParticleField class, which is responsible for
spawning particle bursts and storing particle data (id, position,
velocity, size, opacity, life) in NumPy arrays. The field is bounded:
when a burst pushes it over capacity, the oldest particles by insertion
order are dropped.
"""
import logging
import numpy as np
from typing import Dict, Any, Optional

from constants import DEFAULT_EFFECT_PARAMETERS

# --- Data Contracts ---
#
# class ParticleField:
#   - __init__(self, params: Optional[Dict[str, Any]] = None):
#     - Inputs:
#       - params: The "effect_parameters" config section. Keys used:
#         "seed", "max_particles", "burst_size", "spawn_jitter",
#         "spawn_speed", "spawn_lift", "size_min", "size_max".
#     - Side Effects: Creates empty state arrays and a seeded RNG.
#     - Invariants:
#       - self.ids is an int64 array of shape (N,), strictly increasing.
#       - self.positions / self.velocities are float64 arrays of shape (N, 2).
#       - self.sizes / self.opacities / self.lives are float64 arrays of shape (N,).
#       - N <= self.max_particles at all times.
#
#   - spawn_burst(self, x: float, y: float) -> np.ndarray:
#     - Outputs: The ids of the newly created particles.
#     - Side Effects: Appends burst_size particles around (x, y), then
#       evicts the oldest entries until N <= max_particles.
#
#   - retain(self, mask: np.ndarray) -> int:
#     - Outputs: The number of particles removed.

class ParticleField:
    """
    A bounded container for all particles, managing their state via NumPy arrays.
    """
    def __init__(self, params: Optional[Dict[str, Any]] = None):
        params = params if params is not None else {}
        defaults = DEFAULT_EFFECT_PARAMETERS
        self.max_particles = int(params.get('max_particles', defaults['max_particles']))
        self.burst_size = int(params.get('burst_size', defaults['burst_size']))
        self.spawn_jitter = float(params.get('spawn_jitter', defaults['spawn_jitter']))
        self.spawn_speed = float(params.get('spawn_speed', defaults['spawn_speed']))
        self.spawn_lift = float(params.get('spawn_lift', defaults['spawn_lift']))
        self.size_min = float(params.get('size_min', defaults['size_min']))
        self.size_max = float(params.get('size_max', defaults['size_max']))
        self.seed = params.get('seed', defaults['seed'])

        if self.burst_size < 1 or self.max_particles < self.burst_size:
            msg = (
                f"Configuration error: max_particles ({self.max_particles}) must be at "
                f"least burst_size ({self.burst_size}), and burst_size must be positive."
            )
            logging.critical(msg)
            raise ValueError(msg)
        if not 0 < self.size_min <= self.size_max:
            msg = (
                f"Configuration error: particle size range [{self.size_min}, "
                f"{self.size_max}] must be positive and ordered."
            )
            logging.critical(msg)
            raise ValueError(msg)

        # All randomness in the field comes from one dedicated RNG.
        self.rng = np.random.default_rng(self.seed)
        self.next_id = 0
        self.clear()

        logging.info(
            f"ParticleField initialized: capacity {self.max_particles}, "
            f"{self.burst_size} particles per burst."
        )

    def __len__(self) -> int:
        return self.ids.shape[0]

    def clear(self) -> None:
        """Drops every particle. Ids keep counting from where they were."""
        self.ids = np.zeros(0, dtype=np.int64)
        self.positions = np.zeros((0, 2), dtype=np.float64)
        self.velocities = np.zeros((0, 2), dtype=np.float64)
        self.sizes = np.zeros(0, dtype=np.float64)
        self.opacities = np.zeros(0, dtype=np.float64)
        self.lives = np.zeros(0, dtype=np.float64)

    def spawn_burst(self, x: float, y: float) -> np.ndarray:
        """
        Appends a burst of fresh particles scattered around (x, y).

        Args:
            x (float): Pointer x coordinate in viewport pixels.
            y (float): Pointer y coordinate in viewport pixels.

        Returns:
            np.ndarray: The ids assigned to the new particles.
        """
        n = self.burst_size
        jitter = self.spawn_jitter
        speed = self.spawn_speed

        new_ids = np.arange(self.next_id, self.next_id + n, dtype=np.int64)
        self.next_id += n

        new_positions = np.array([x, y], dtype=np.float64) + self.rng.uniform(-jitter, jitter, size=(n, 2))
        new_velocities = self.rng.uniform(-speed, speed, size=(n, 2))
        # Bursts drift upward on average before gravity takes over.
        new_velocities[:, 1] -= self.spawn_lift
        new_sizes = self.rng.uniform(self.size_min, self.size_max, size=n)

        self.ids = np.concatenate([self.ids, new_ids])
        self.positions = np.concatenate([self.positions, new_positions])
        self.velocities = np.concatenate([self.velocities, new_velocities])
        self.sizes = np.concatenate([self.sizes, new_sizes])
        self.opacities = np.concatenate([self.opacities, np.ones(n)])
        self.lives = np.concatenate([self.lives, np.ones(n)])

        overflow = len(self) - self.max_particles
        if overflow > 0:
            self._evict_oldest(overflow)
        return new_ids

    def _evict_oldest(self, count: int) -> None:
        # Arrays are kept in insertion order, so the oldest entries are at the front.
        self.ids = self.ids[count:]
        self.positions = self.positions[count:]
        self.velocities = self.velocities[count:]
        self.sizes = self.sizes[count:]
        self.opacities = self.opacities[count:]
        self.lives = self.lives[count:]
        logging.debug(f"ParticleField at capacity; evicted {count} oldest particles.")

    def retain(self, mask: np.ndarray) -> int:
        """
        Keeps only the particles where `mask` is True, preserving order.

        Returns:
            int: The number of particles removed.
        """
        removed = len(self) - int(np.count_nonzero(mask))
        if removed:
            self.ids = self.ids[mask]
            self.positions = self.positions[mask]
            self.velocities = self.velocities[mask]
            self.sizes = self.sizes[mask]
            self.opacities = self.opacities[mask]
            self.lives = self.lives[mask]
        return removed
