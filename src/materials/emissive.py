# materials/emissive.py
import random
from core.ray import Ray
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

class Emissive(Material):
    """
    Light source: never scatters, its color is the radiance it emits.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> ScatterResult:
        return None, self.color.evaluate(rec)
