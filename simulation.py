# simulation.py
"""
Handles the particle physics tick.

This module defines the Simulation class, which advances every particle
of a ParticleField by one fixed step: Euler integration of position, a
constant downward pull on the y velocity, and multiplicative decay of
opacity, life and size. Particles whose life has decayed to the
threshold are removed afterwards.
"""
import logging
import numpy as np
from typing import Dict, Any, Optional
from numba import jit

from particle import ParticleField
from constants import DEFAULT_EFFECT_PARAMETERS

# --- Data Contracts ---
#
# class Simulation:
#   - __init__(self, field: ParticleField, params: Optional[Dict[str, Any]] = None):
#     - Inputs:
#       - field: An initialized ParticleField object.
#       - params: The "effect_parameters" config section. Keys used:
#         "gravity", "opacity_decay", "life_decay", "size_decay",
#         "life_threshold".
#     - Side Effects: Stores a reference to the field and the parameters.
#
#   - step(self) -> None:
#     - Side Effects: Mutates the field's arrays in place, then drops
#       particles with life <= life_threshold.
#     - Invariants: Surviving particles keep their relative order. No
#       particle is ever added by a step.

@jit(nopython=True)
def _integrate_numba(positions, velocities, sizes, opacities, lives,
                     gravity, opacity_decay, life_decay, size_decay):
    """
    Numba-jitted single Euler step over every particle.

    Position moves by the velocity from before this step; gravity is
    applied to the velocity afterwards.
    """
    particle_count = positions.shape[0]
    for i in range(particle_count):
        positions[i, 0] += velocities[i, 0]
        positions[i, 1] += velocities[i, 1]
        velocities[i, 1] += gravity
        opacities[i] *= opacity_decay
        lives[i] *= life_decay
        sizes[i] *= size_decay


class Simulation:
    """
    Advances the particle field by one fixed physics tick.
    """
    def __init__(self, field: ParticleField, params: Optional[Dict[str, Any]] = None):
        """
        Initializes the physics step.

        Args:
            field (ParticleField): The particle field to advance.
            params (Dict[str, Any]): Effect parameters from config.
        """
        params = params if params is not None else {}
        defaults = DEFAULT_EFFECT_PARAMETERS
        self.field = field
        self.gravity = float(params.get('gravity', defaults['gravity']))
        self.opacity_decay = float(params.get('opacity_decay', defaults['opacity_decay']))
        self.life_decay = float(params.get('life_decay', defaults['life_decay']))
        self.size_decay = float(params.get('size_decay', defaults['size_decay']))
        self.life_threshold = float(params.get('life_threshold', defaults['life_threshold']))
        self.tick_count = 0

        # Decays must shrink values; a factor of 1.0 or more would keep particles forever.
        for name in ('opacity_decay', 'life_decay', 'size_decay'):
            value = getattr(self, name)
            if not 0.0 < value < 1.0:
                msg = f"Configuration error: {name} must be in (0, 1), got {value}."
                logging.critical(msg)
                raise ValueError(msg)
        if not 0.0 <= self.life_threshold < 1.0:
            msg = f"Configuration error: life_threshold must be in [0, 1), got {self.life_threshold}."
            logging.critical(msg)
            raise ValueError(msg)

        logging.info(
            f"Simulation initialized: gravity {self.gravity}, life decay {self.life_decay}, "
            f"expiry at life <= {self.life_threshold}."
        )

    def step(self):
        """
        Executes one physics tick.
        """
        field = self.field
        self.tick_count += 1
        if len(field) == 0:
            return

        # 1. Integrate and decay in place (using Numba)
        _integrate_numba(
            field.positions, field.velocities, field.sizes, field.opacities, field.lives,
            self.gravity, self.opacity_decay, self.life_decay, self.size_decay
        )

        # 2. Drop expired particles
        field.retain(field.lives > self.life_threshold)
