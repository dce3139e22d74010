# visualization.py
"""
Handles the presentation of the maintenance page using Pygame.
"""
import logging
import pygame
import numpy as np
from typing import Dict, Any, List, Optional, Tuple

from constants import (
    FULLSCREEN, WINDOW_WIDTH, WINDOW_HEIGHT, FPS, BACKGROUND_GRADIENT,
    TEXT_COLOR, TITLE_GLOW_COLORS, HIGHLIGHT_COLOR, GLOW_COLOR, GLOW_ALPHA,
    HIGHLIGHT_ALPHA, PARTICLE_CORE_COLOR, PARTICLE_GLOW_COLOR, RIPPLE_DIAMETER,
    RIPPLE_COLOR, RIPPLE_ANIMATION_MS, RIPPLE_KEYFRAMES, LOGO_PATH, LOGO_WIDTH,
    LOGO_TOP_RATIO, LOGO_FLOAT_PERIOD_MS, LOGO_FLOAT_OFFSET, LOGO_FLOAT_ANGLE,
    PLACEHOLDER_SIZE, PAGE_TITLE, PAGE_TAGLINE, PAGE_SUBTITLE_LINES,
    TITLE_GLOW_PERIOD_MS, MOUSE_MOVE, CLICK
)
from event_loop import EventLoop
from scene import Scene, ParticleSprite, RippleSprite

# --- Data Contracts ---
#
# class Visualizer:
#   - __init__(self, vis_params: Optional[Dict[str, Any]] = None):
#     - Inputs:
#       - vis_params: The "visualization" config section ("fullscreen",
#         "width", "height", "fps", "title", "tagline", "subtitle_lines",
#         "logo_path", "logo_width").
#     - Side Effects: Initializes Pygame, creates the display surface and
#       pre-renders the background, glow and ripple surfaces. A missing
#       logo is replaced by a placeholder; it never raises.
#
#   - handle_events(self, loop: EventLoop) -> bool:
#     - Outputs: False if the user has quit, True otherwise.
#     - Side Effects: Dispatches "mousemove" and "click" signals on the loop.
#
#   - draw(self, scene: Scene, now_ms: float) -> None:
#     - Side Effects: Paints the scene plus the time-based ripple, logo
#       and title animations, then flips the display.


def _radial_alpha_surface(radius: int, color: Tuple[int, int, int], stops: List[Tuple[float, float]]) -> pygame.Surface:
    """
    Renders a circle of `color` whose alpha follows `stops`, a list of
    (distance / radius, alpha) pairs. Alpha past the last stop is held.
    """
    diameter = radius * 2
    surf = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
    surf.fill((color[0], color[1], color[2], 0))
    coords = np.arange(diameter) - radius + 0.5
    distance = np.sqrt(coords[:, np.newaxis] ** 2 + coords[np.newaxis, :] ** 2) / radius
    positions, alphas = zip(*stops)
    alpha = np.interp(distance, positions, alphas)
    pixels = pygame.surfarray.pixels_alpha(surf)
    pixels[:] = alpha.astype(np.uint8)
    del pixels  # Unlocks the surface
    return surf


def _ping_pong(now_ms: float, period_ms: float) -> float:
    """Maps time to a 0 -> 1 -> 0 ramp lasting 2 * period_ms."""
    phase = (now_ms % (2 * period_ms)) / period_ms
    return phase if phase <= 1.0 else 2.0 - phase


def ripple_frame(age_ms: float, duration_ms: float = RIPPLE_ANIMATION_MS) -> Tuple[float, float]:
    """Returns the (scale, opacity) of a ripple `age_ms` into its animation."""
    progress = min(max(age_ms / duration_ms, 0.0), 1.0)
    points = np.array(RIPPLE_KEYFRAMES)
    scale = float(np.interp(progress, points[:, 0], points[:, 1]))
    opacity = float(np.interp(progress, points[:, 0], points[:, 2]))
    return scale, opacity


def logo_float(now_ms: float) -> Tuple[float, float]:
    """Returns the (vertical offset, clockwise degrees) of the floating logo."""
    phase = (now_ms % LOGO_FLOAT_PERIOD_MS) / LOGO_FLOAT_PERIOD_MS
    quarters = [0.0, 0.25, 0.5, 0.75, 1.0]
    offset = float(np.interp(phase, quarters, [0, -LOGO_FLOAT_OFFSET, 0, LOGO_FLOAT_OFFSET, 0]))
    angle = float(np.interp(phase, quarters, [0, -LOGO_FLOAT_ANGLE, 0, LOGO_FLOAT_ANGLE, 0]))
    return offset, angle


class Visualizer:
    """
    Renders the page and translates Pygame input into host signals.
    """
    def __init__(self, vis_params: Optional[Dict[str, Any]] = None):
        """
        Initializes Pygame and the display window.
        """
        params = vis_params if vis_params is not None else {}
        pygame.init()
        pygame.font.init()

        if params.get('fullscreen', FULLSCREEN):
            display_info = pygame.display.Info()
            width, height = display_info.current_w, display_info.current_h
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
        else:
            width = params.get('width', WINDOW_WIDTH)
            height = params.get('height', WINDOW_HEIGHT)
            self.screen = pygame.display.set_mode((width, height))
        self.width, self.height = width, height

        self.title = params.get('title', PAGE_TITLE)
        self.tagline = params.get('tagline', PAGE_TAGLINE)
        self.subtitle_lines = params.get('subtitle_lines', PAGE_SUBTITLE_LINES)
        self.fps = params.get('fps', FPS)

        pygame.display.set_caption(self.title)
        self.clock = pygame.time.Clock()

        # --- Pre-render static surfaces ---
        self.background = self._render_background(width, height)
        self.glow_surface = _radial_alpha_surface(
            150, GLOW_COLOR, [(0.0, GLOW_ALPHA), (0.3, GLOW_ALPHA / 2), (0.7, 0)]
        )
        self.highlight_surface = _radial_alpha_surface(
            100, (255, 255, 255), [(0.0, HIGHLIGHT_ALPHA), (0.5, 0)]
        )
        self.ripple_surface = _radial_alpha_surface(
            RIPPLE_DIAMETER // 2, RIPPLE_COLOR, [(0.0, 102), (0.3, 51), (0.5, 26), (0.7, 0)]
        )
        self.logo = self._load_logo(
            params.get('logo_path', LOGO_PATH), params.get('logo_width', LOGO_WIDTH)
        )

        try:
            self.font_title = pygame.font.SysFont("Arial Black", 56, bold=True)
            self.font_tagline = pygame.font.SysFont("Arial Black", 30, bold=True)
            self.font_subtitle = pygame.font.SysFont("Arial", 22)
        except pygame.error:
            logging.warning("Arial fonts not found, falling back to the default font.")
            self.font_title = pygame.font.Font(None, 64)
            self.font_tagline = pygame.font.Font(None, 36)
            self.font_subtitle = pygame.font.Font(None, 26)

        logging.info(f"Visualizer initialized with Pygame display ({width}x{height}).")

    def _render_background(self, width: int, height: int) -> pygame.Surface:
        """Renders the static three-stop diagonal gradient."""
        xs = np.linspace(0.0, 1.0, width)[:, np.newaxis]
        ys = np.linspace(0.0, 1.0, height)[np.newaxis, :]
        t = (xs + ys) / 2
        stops = np.array(BACKGROUND_GRADIENT, dtype=np.float64)
        positions = np.linspace(0.0, 1.0, len(stops))
        rgb = np.stack(
            [np.interp(t, positions, stops[:, channel]) for channel in range(3)], axis=-1
        )
        return pygame.surfarray.make_surface(rgb.astype(np.uint8))

    def _load_logo(self, path: str, width: int) -> pygame.Surface:
        """Loads and scales the logo, falling back to a broken-image placeholder."""
        try:
            image = pygame.image.load(path).convert_alpha()
        except (pygame.error, OSError) as e:
            logging.warning(f"Could not load logo from {path}: {e}. Using placeholder.")
            self.logo_loaded = False
            return self._broken_image_placeholder()

        self.logo_loaded = True
        image_w, image_h = image.get_size()
        height = max(1, round(image_h * width / image_w))
        logging.debug(f"Logo loaded from {path} ({image_w}x{image_h}), scaled to {width}x{height}.")
        return pygame.transform.smoothscale(image, (width, height))

    def _broken_image_placeholder(self) -> pygame.Surface:
        w, h = PLACEHOLDER_SIZE
        surf = pygame.Surface((w, h), pygame.SRCALPHA)
        frame = pygame.Rect(0, 0, w, h)
        pygame.draw.rect(surf, (160, 160, 160, 200), frame, 2)
        pygame.draw.line(surf, (160, 160, 160, 200), frame.topleft, frame.bottomright, 2)
        pygame.draw.line(surf, (160, 160, 160, 200), frame.topright, frame.bottomleft, 2)
        return surf

    def ticks(self) -> int:
        return pygame.time.get_ticks()

    def tick(self) -> int:
        """Caps the frame rate; returns the milliseconds since the last call."""
        return self.clock.tick(self.fps)

    def handle_events(self, loop: EventLoop) -> bool:
        """
        Forwards pointer input to the event loop.

        Returns:
            bool: False if the page should close, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    logging.info("ESC key pressed. Shutting down visualizer.")
                    return False

            if event.type == pygame.MOUSEMOTION:
                loop.dispatch(MOUSE_MOVE, *event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                loop.dispatch(CLICK, *event.pos)
        return True

    def _draw_glow(self, scene: Scene):
        glow = scene.glow
        cx, cy = glow.center
        self.screen.blit(self.glow_surface, (int(cx - glow.radius), int(cy - glow.radius)))
        hx, hy = glow.highlight_center
        self.screen.blit(self.highlight_surface, (int(hx - glow.highlight_radius), int(hy - glow.highlight_radius)))

    def _draw_ripple(self, ripple: RippleSprite, now_ms: float):
        scale, opacity = ripple_frame(now_ms - ripple.created_at)
        size = int(ripple.diameter * scale)
        if size < 1 or opacity <= 0:
            return
        # Scaling is about the sprite's centre, as the sprite box itself stays fixed.
        center_x = ripple.left + ripple.diameter / 2
        center_y = ripple.top + ripple.diameter / 2
        scaled = pygame.transform.smoothscale(self.ripple_surface, (size, size))
        scaled.set_alpha(int(opacity * 255))
        self.screen.blit(scaled, (int(center_x - size / 2), int(center_y - size / 2)))

    def _draw_particle(self, sprite: ParticleSprite):
        core_radius = max(1, int(round(sprite.diameter / 2)))
        halo_radius = core_radius + max(1, int(round(sprite.glow_radius / 2)))
        surf = pygame.Surface((halo_radius * 2, halo_radius * 2), pygame.SRCALPHA)
        center = (halo_radius, halo_radius)
        pygame.draw.circle(surf, (*PARTICLE_GLOW_COLOR, int(sprite.glow_opacity * 255)), center, halo_radius)
        pygame.draw.circle(surf, (*PARTICLE_CORE_COLOR, int(sprite.opacity * 255)), center, core_radius)
        center_x = sprite.left + sprite.diameter / 2
        center_y = sprite.top + sprite.diameter / 2
        self.screen.blit(surf, (int(center_x - halo_radius), int(center_y - halo_radius)))

    def _draw_logo(self, now_ms: float):
        offset, angle = logo_float(now_ms)
        # Pygame rotates counter-clockwise for positive angles.
        rotated = pygame.transform.rotate(self.logo, -angle)
        rect = rotated.get_rect(center=(self.width / 2, self.height * LOGO_TOP_RATIO + offset))
        self.screen.blit(rotated, rect)

    def _draw_text(self, now_ms: float):
        glow = _ping_pong(now_ms, TITLE_GLOW_PERIOD_MS)
        title_color = pygame.Color(TITLE_GLOW_COLORS[0]).lerp(TITLE_GLOW_COLORS[1], glow)

        y = self.height * 0.45
        title_surf = self.font_title.render(self.title, True, title_color)
        self.screen.blit(title_surf, title_surf.get_rect(midtop=(self.width / 2, y)))
        y += title_surf.get_height() + 24

        tagline_surf = self.font_tagline.render(self.tagline, True, HIGHLIGHT_COLOR)
        self.screen.blit(tagline_surf, tagline_surf.get_rect(midtop=(self.width / 2, y)))
        y += tagline_surf.get_height() + 24

        for line in self.subtitle_lines:
            line_surf = self.font_subtitle.render(line, True, TEXT_COLOR)
            self.screen.blit(line_surf, line_surf.get_rect(midtop=(self.width / 2, y)))
            y += self.font_subtitle.get_linesize()

    def draw(self, scene: Scene, now_ms: float) -> None:
        """
        Paints one frame: background, pointer glow, ripples, particles, logo, text.
        """
        self.screen.blit(self.background, (0, 0))
        self._draw_glow(scene)
        for ripple in scene.ripples:
            self._draw_ripple(ripple, now_ms)
        for sprite in scene.particles:
            self._draw_particle(sprite)
        self._draw_logo(now_ms)
        self._draw_text(now_ms)
        pygame.display.flip()

    def close(self):
        """Shuts down Pygame."""
        pygame.font.quit()
        pygame.quit()
