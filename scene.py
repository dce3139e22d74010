# scene.py
"""
Builds the declarative description of one frame.

`build_scene` is a pure function of the pointer position, the particle
field and the ripple set. It returns plain immutable draw instructions
and never touches the state it reads; the Visualizer turns them into
pixels.
"""
from typing import Iterable, NamedTuple, Tuple

from constants import GLOW_RADIUS, HIGHLIGHT_RADIUS, HIGHLIGHT_OFFSET, RIPPLE_DIAMETER
from particle import ParticleField
from ripple import Ripple


class PointerGlow(NamedTuple):
    center: Tuple[float, float]
    radius: float
    highlight_center: Tuple[float, float]
    highlight_radius: float


class ParticleSprite(NamedTuple):
    id: int
    left: float
    top: float
    diameter: float
    opacity: float
    glow_radius: float
    glow_opacity: float


class RippleSprite(NamedTuple):
    id: int
    left: float
    top: float
    diameter: float
    created_at: float


class Scene(NamedTuple):
    glow: PointerGlow
    particles: Tuple[ParticleSprite, ...]
    ripples: Tuple[RippleSprite, ...]


def build_scene(pointer: Tuple[float, float], field: ParticleField, ripples: Iterable[Ripple]) -> Scene:
    """
    Maps the current effect state to draw instructions.

    Args:
        pointer (Tuple[float, float]): Last accepted pointer position.
        field (ParticleField): Surviving particles.
        ripples (Iterable[Ripple]): Surviving ripples.

    Returns:
        Scene: Background glow, then one sprite per particle and per ripple.
    """
    px, py = float(pointer[0]), float(pointer[1])
    glow = PointerGlow(
        center=(px, py),
        radius=float(GLOW_RADIUS),
        highlight_center=(px - HIGHLIGHT_OFFSET, py - HIGHLIGHT_OFFSET),
        highlight_radius=float(HIGHLIGHT_RADIUS),
    )

    # tolist() copies out of the field's arrays, so sprites hold plain floats.
    particles = tuple(
        ParticleSprite(
            id=pid,
            left=x - size / 2,
            top=y - size / 2,
            diameter=size,
            opacity=opacity,
            glow_radius=size,
            glow_opacity=opacity * 0.5,
        )
        for pid, (x, y), size, opacity in zip(
            field.ids.tolist(), field.positions.tolist(),
            field.sizes.tolist(), field.opacities.tolist()
        )
    )

    half = RIPPLE_DIAMETER / 2
    ripple_sprites = tuple(
        RippleSprite(r.id, r.x - half, r.y - half, float(RIPPLE_DIAMETER), r.created_at)
        for r in ripples
    )
    return Scene(glow, particles, ripple_sprites)
