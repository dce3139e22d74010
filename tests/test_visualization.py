"""
test_visualization.py
---------------------
Tests for the Pygame presentation layer, run against SDL's dummy video
driver: animation curves, logo fallback, input translation and drawing.
"""
import pygame
import pytest

from constants import MOUSE_MOVE, CLICK, PLACEHOLDER_SIZE
from visualization import Visualizer, ripple_frame, logo_float


@pytest.fixture
def visualizer(tmp_path):
    vis = Visualizer({
        "width": 320,
        "height": 240,
        "logo_path": str(tmp_path / "missing-logo.png"),
    })
    yield vis
    vis.close()


# --- Animation curves ---

@pytest.mark.parametrize("age,expected", [
    (0, (0.0, 0.8)),
    (300, (0.8, 0.6)),
    (700, (1.5, 0.3)),
    (1000, (2.5, 0.0)),
    (5000, (2.5, 0.0)),
])
def test_ripple_frame_follows_keyframes(age, expected):
    assert ripple_frame(age) == pytest.approx(expected)


def test_ripple_frame_interpolates_between_keyframes():
    scale, opacity = ripple_frame(150)
    assert scale == pytest.approx(0.4)
    assert opacity == pytest.approx(0.7)


def test_logo_float_cycle():
    assert logo_float(0) == pytest.approx((0.0, 0.0))
    assert logo_float(1500) == pytest.approx((-10.0, -5.0))
    assert logo_float(4500) == pytest.approx((10.0, 5.0))
    assert logo_float(6000) == pytest.approx((0.0, 0.0))


# --- Window and assets ---

def test_missing_logo_falls_back_to_placeholder(visualizer):
    assert visualizer.logo_loaded is False
    assert visualizer.logo.get_size() == PLACEHOLDER_SIZE


def test_logo_is_scaled_to_configured_width(tmp_path):
    logo_path = tmp_path / "logo.png"
    image = pygame.Surface((40, 20))
    image.fill((200, 30, 30))
    pygame.image.save(image, str(logo_path))

    vis = Visualizer({"width": 320, "height": 240, "logo_path": str(logo_path), "logo_width": 100})
    try:
        assert vis.logo_loaded is True
        assert vis.logo.get_size() == (100, 50)
    finally:
        vis.close()


def test_window_uses_configured_size(visualizer):
    assert visualizer.screen.get_size() == (320, 240)
    assert visualizer.background.get_size() == (320, 240)


# --- Input ---

def test_pointer_events_become_loop_signals(visualizer, loop, monkeypatch):
    received = []
    loop.add_listener(MOUSE_MOVE, lambda x, y: received.append(("move", x, y)))
    loop.add_listener(CLICK, lambda x, y: received.append(("click", x, y)))
    events = [
        pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 20)),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(5, 6), button=1),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(7, 8), button=3),
    ]
    monkeypatch.setattr(pygame.event, "get", lambda: events)

    assert visualizer.handle_events(loop) is True
    assert received == [("move", 10, 20), ("click", 5, 6)]


@pytest.mark.parametrize("event", [
    pygame.event.Event(pygame.QUIT),
    pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
])
def test_quit_and_escape_close_the_page(visualizer, loop, monkeypatch, event):
    monkeypatch.setattr(pygame.event, "get", lambda: [event])
    assert visualizer.handle_events(loop) is False


# --- Drawing ---

def test_draw_full_scene(visualizer, loop, page):
    loop.dispatch(MOUSE_MOVE, 160, 120)
    loop.dispatch(CLICK, 300, 10)
    loop.advance(200)

    visualizer.draw(page.scene(), loop.now())


def test_draw_at_window_edges(visualizer, loop, page):
    loop.dispatch(MOUSE_MOVE, 0, 0)
    loop.dispatch(CLICK, 0, 0)
    visualizer.draw(page.scene(), loop.now())
    loop.advance(500)
    loop.dispatch(MOUSE_MOVE, 320, 240)
    visualizer.draw(page.scene(), loop.now())
