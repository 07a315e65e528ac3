"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Packages live under src/
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from core.vector import Vector3  # noqa: E402
from materials.lambertian import Lambertian  # noqa: E402
from materials.emissive import Emissive  # noqa: E402


class FixedRandom:
    """Random source that always draws the same value."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return a + (b - a) * self.value


@pytest.fixture
def rng():
    """Provide a seeded random source."""
    return random.Random(1234)


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def grey():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def white_light():
    return Emissive(Vector3(1.0, 1.0, 1.0))
