# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

# Rays whose squared direction length falls below this are treated as misses.
DEGENERATE_DIRECTION = 1e-12

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        if a < DEGENERATE_DIRECTION:
            return None
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies strictly inside the range
        root = (-half_b - sqrt_disc) / a
        if not t_min < root < t_max:
            root = (-half_b + sqrt_disc) / a
            if not t_min < root < t_max:
                return None

        outward_normal = (ray.at(root) - self.center).normalize()
        return HitRecord(ray, root, outward_normal, self.material)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
