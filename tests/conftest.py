"""Pytest fixtures for crystallisation tests."""

import pytest
import sys
from pathlib import Path

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))

from crystallisation.point import Point
from crystallisation.polygon import Polygon
from crystallisation.random import Random


class ScriptedRandom:
    """Random source replaying fixed values in [0, 1)."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def _next(self):
        value = self.values[self.calls]
        self.calls += 1
        return value

    def float(self):
        return self._next()

    def uniform(self, a, b=None):
        if b is None:
            a, b = 0.0, a
        return a + self._next() * (b - a)


@pytest.fixture
def square() -> Polygon:
    """10x10 square, clockwise on screen."""
    return Polygon([Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)])


@pytest.fixture
def hexagon() -> Polygon:
    """Regular hexagon of radius 50 centred at (100, 100)."""
    return Polygon.regular(6, 50, Point(100, 100))


@pytest.fixture
def rng() -> Random:
    """Seeded random source."""
    return Random(12345)


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRandom
