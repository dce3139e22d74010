# constants.py
"""
Application-level constants.

These values are static and do not change between runs. The effect
defaults below are used whenever `config.json` omits a key, so the page
behaves identically with an empty configuration.
"""

# Visualization settings
# Set to True to run in borderless fullscreen mode.
# Set to False to run in a fixed-size window (WINDOW_WIDTH x WINDOW_HEIGHT).
FULLSCREEN = False
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60

# Three-stop diagonal page background (top-left -> bottom-right).
BACKGROUND_GRADIENT = [
    (24, 23, 23),   # #181717
    (27, 34, 48),   # #1b2230
    (22, 1, 1),     # #160101
]
TEXT_COLOR = (255, 255, 255)
TITLE_GLOW_COLORS = [(139, 0, 0), (220, 20, 60)]  # Dark red -> Crimson
HIGHLIGHT_COLOR = (255, 45, 146)

# --- Pointer Glow ---
GLOW_RADIUS = 150
GLOW_COLOR = (0, 150, 255)
GLOW_ALPHA = 26  # ~0.1 opacity
HIGHLIGHT_RADIUS = 100
HIGHLIGHT_OFFSET = 20
HIGHLIGHT_ALPHA = 8  # ~0.03 opacity

# --- Particles ---
PARTICLE_CORE_COLOR = (135, 206, 250)   # Light sky blue
PARTICLE_GLOW_COLOR = (0, 191, 255)     # Deep sky blue

# --- Ripples ---
RIPPLE_DIAMETER = 200
RIPPLE_COLOR = (0, 180, 255)
RIPPLE_ANIMATION_MS = 1000
# (progress, scale, opacity) keyframes of the click ripple animation.
RIPPLE_KEYFRAMES = [
    (0.0, 0.0, 0.8),
    (0.3, 0.8, 0.6),
    (0.7, 1.5, 0.3),
    (1.0, 2.5, 0.0),
]

# --- Logo ---
LOGO_PATH = "assets/logo.png"
LOGO_WIDTH = 600
LOGO_TOP_RATIO = 0.15
LOGO_FLOAT_PERIOD_MS = 6000
LOGO_FLOAT_OFFSET = 10
LOGO_FLOAT_ANGLE = 5
PLACEHOLDER_SIZE = (64, 64)

# --- Page Text ---
PAGE_TITLE = "Website Under Maintenance"
PAGE_TAGLINE = "Stay curious. We will be live soon!"
PAGE_SUBTITLE_LINES = [
    "The new site is coming soon.",
    "Stay tuned for something extraordinary!",
]
TITLE_GLOW_PERIOD_MS = 3000

# --- Effect Defaults ---
# Keys mirror the "effect_parameters" section of config.json.
DEFAULT_EFFECT_PARAMETERS = {
    "seed": None,
    "max_particles": 150,
    "burst_size": 2,
    "move_throttle_ms": 20,
    "tick_interval_ms": 24,
    "spawn_jitter": 12.5,
    "spawn_speed": 1.25,
    "spawn_lift": 0.5,
    "size_min": 3.0,
    "size_max": 9.0,
    "gravity": 0.18,
    "opacity_decay": 0.96,
    "life_decay": 0.98,
    "size_decay": 0.995,
    "life_threshold": 0.1,
    "ripple_duration_ms": 1000,
}

# Host signal names dispatched through the event loop.
MOUSE_MOVE = "mousemove"
CLICK = "click"
