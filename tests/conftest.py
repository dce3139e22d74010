"""
conftest.py
-----------
Shared pytest configuration and fixtures for the maintenance page tests.

Contains:
- Headless SDL drivers so Pygame can open a display without a screen
- Fixtures for a fresh event loop, seeded effect parameters and a mounted page
- A guard that restores the root logger after tests that configure it
"""

import logging
import os
import sys

import pytest

# Select the dummy drivers before pygame is imported anywhere.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add the project root to the Python path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from constants import DEFAULT_EFFECT_PARAMETERS
from event_loop import EventLoop
from page import MaintenancePage


@pytest.fixture
def loop():
    """A fresh event loop starting at t=0."""
    return EventLoop()


@pytest.fixture
def params():
    """Default effect parameters with a fixed seed."""
    values = dict(DEFAULT_EFFECT_PARAMETERS)
    values["seed"] = 1234
    return values


@pytest.fixture
def page(loop, params):
    """A mounted page, unmounted again at teardown."""
    page = MaintenancePage(loop, params)
    page.mount()
    yield page
    page.unmount()


@pytest.fixture
def restore_root_logger():
    """Puts the root logger's handlers and level back after the test."""
    logger = logging.getLogger()
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
