# materials/material.py
import random
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.textures import ColorType, as_color_type

ScatterResult = Tuple[Optional[Ray], Optional[Vector3]]

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    scatter() returns a pair (scattered_ray, color):
      (ray, color)   the surface reflects or transmits; color attenuates
                     whatever the scattered ray brings back.
      (None, color)  the surface emits color and the path ends.
      (None, None)   the ray is absorbed.

    Materials are immutable once built and are shared between primitives
    and render threads.
    """
    def __init__(self, color: Union[Vector3, ColorType]):
        self.color = as_color_type(color)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> ScatterResult:
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color!r})"
