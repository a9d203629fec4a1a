"""
Pytest configuration and shared fixtures for the snake test suite.
"""

import os
import sys
from pathlib import Path

import pytest

# No real window is needed to exercise pygame surfaces and events
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# Ensure project root is on PYTHONPATH so 'torus_snake' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class FakeRandom:
    """randint() stand-in that hands out a fixed sequence of values"""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0)


@pytest.fixture
def fake_random():
    return FakeRandom


@pytest.fixture
def far_food():
    """A food position well away from the start body"""
    return (20, 20)
