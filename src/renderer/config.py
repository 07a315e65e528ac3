"""Render settings, with defaults overridable from the environment."""

import os
from dataclasses import dataclass, field
from typing import Optional

from renderer.integrator import Background, NIGHT

MAX_DEPTH = 16
# The integrator recurses once per bounce; stay well inside the interpreter's
# default recursion limit.
MAX_DEPTH_LIMIT = 500
WORKERS = 6


@dataclass(frozen=True)
class RenderConfig:
    """
    Everything a render needs besides the scene and camera.

    Attributes:
        width, height: Output image size in pixels (at least 2x2).
        samples_per_pixel: Jittered rays averaged per pixel.
        max_depth: Bounce budget handed to the integrator, at most
            MAX_DEPTH_LIMIT.
        workers: Size of the thread pool sampling columns.
        seed: When set, every column draws from its own random.Random
            seeded from (seed, column) and the render is reproducible.
        background: Gradient returned for rays that escape the scene.
    """
    width: int
    height: int
    samples_per_pixel: int
    max_depth: int = MAX_DEPTH
    workers: int = WORKERS
    seed: Optional[int] = None
    background: Background = field(default=NIGHT)

    def __post_init__(self):
        if self.width < 2 or self.height < 2:
            raise ValueError(f"Image must be at least 2x2, got {self.width}x{self.height}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be >= 1, got {self.samples_per_pixel}")
        if not 0 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be in [0, {MAX_DEPTH_LIMIT}], got {self.max_depth}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")

    @classmethod
    def from_env(cls, width: int, height: int, samples_per_pixel: int, **overrides) -> "RenderConfig":
        """
        Build a config reading RAYTRACER_WORKERS, RAYTRACER_MAX_DEPTH and
        RAYTRACER_SEED; explicit keyword overrides win over the environment.
        """
        settings = {
            "max_depth": int(os.getenv("RAYTRACER_MAX_DEPTH", str(MAX_DEPTH))),
            "workers": int(os.getenv("RAYTRACER_WORKERS", str(WORKERS))),
        }
        seed = os.getenv("RAYTRACER_SEED")
        if seed:
            settings["seed"] = int(seed)
        settings.update(overrides)
        return cls(width=width, height=height, samples_per_pixel=samples_per_pixel, **settings)
