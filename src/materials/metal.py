# materials/metal.py
import random
from typing import Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult
from materials.textures import ColorType

class Metal(Material):
    """
    Reflective metal. fuzz = 0 is a perfect mirror; larger values roughen
    the reflection by jittering it inside a sphere of that radius.
    """
    def __init__(self, color: Union[Vector3, ColorType], fuzz: float = 0.0):
        super().__init__(color)
        if fuzz < 0:
            raise ValueError(f"Metal fuzz must be non-negative, got {fuzz}")
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> ScatterResult:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_in_unit_sphere(rng) * self.fuzz
        return Ray(rec.p, reflected), self.color.evaluate(rec)

    def __repr__(self) -> str:
        return f"Metal({self.color!r}, fuzz={self.fuzz})"
