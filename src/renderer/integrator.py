# renderer/integrator.py
import random
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable

# Lower bound for bounced rays so they do not re-hit the surface they leave.
T_MIN = 0.0006942
INFINITY = float("inf")


class Background:
    """
    Vertical gradient seen by rays that escape the scene: `bottom` for rays
    pointing straight down, `top` for rays pointing straight up.
    """
    def __init__(self, bottom: Vector3, top: Vector3):
        self.bottom = bottom
        self.top = top

    def value(self, ray: Ray) -> Vector3:
        unit_direction = ray.direction.normalize()
        t = 0.5 * unit_direction.y + 0.5
        return self.bottom * (1.0 - t) + self.top * t

    def __repr__(self) -> str:
        return f"Background({self.bottom!r}, {self.top!r})"


NIGHT = Background(Vector3(0.08, 0.1, 0.2), Vector3(0.032, 0.04, 0.08))
SKY = Background(Vector3(1.0, 1.0, 1.0), Vector3(0.5, 0.7, 1.0))


def ray_color(ray: Ray, world: Hittable, depth: int, rng=random,
              background: Background = NIGHT) -> Vector3:
    """
    Estimate the radiance carried back along `ray`, following at most
    `depth` bounces. Paths cut off by the budget contribute black.
    """
    if depth <= 0:
        return Vector3.zero()

    rec = world.hit(ray, T_MIN, INFINITY)
    if rec is None:
        return background.value(ray)

    scattered, color = rec.material.scatter(ray, rec, rng)
    if color is None:
        return Vector3.zero()
    if scattered is None:
        return color
    return color * ray_color(scattered, world, depth - 1, rng, background)
