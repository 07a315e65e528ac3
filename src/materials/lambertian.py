# materials/lambertian.py
import random
from core.ray import Ray
from core.utils import random_cosine_direction
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

class Lambertian(Material):
    """
    Lambertian diffuse material.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> ScatterResult:
        scatter_direction = random_cosine_direction(rec.normal, rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return Ray(rec.p, scatter_direction), self.color.evaluate(rec)
