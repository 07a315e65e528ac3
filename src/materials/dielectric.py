# src/materials/dielectric.py
import math
import random
from typing import Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, refract, schlick
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult
from materials.textures import ColorType

class Dielectric(Material):
    """
    Transparent material with refractive index `ir`. Each interaction
    either reflects or refracts, chosen by total internal reflection and
    Schlick's reflectance.
    """
    def __init__(self, ir: float, color: Union[Vector3, ColorType] = None):
        super().__init__(color if color is not None else Vector3(1.0, 1.0, 1.0))
        if ir <= 0:
            raise ValueError(f"Refractive index must be positive, got {ir}")
        self.ir = ir

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> ScatterResult:
        # Determine if we're entering or exiting the material
        ratio = 1.0 / self.ir if rec.front_face else self.ir

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ratio * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio)

        return Ray(rec.p, direction), self.color.evaluate(rec)

    def __repr__(self) -> str:
        return f"Dielectric(ir={self.ir}, color={self.color!r})"
