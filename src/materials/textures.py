# materials/textures.py
import math
from typing import Union
from core.vector import Vector3
from geometry.hittable import HitRecord

class ColorType:
    """
    Base class for surface colors. A color is a pure function of the hit
    record; implementations hold no mutable state.
    """
    def evaluate(self, rec: HitRecord) -> Vector3:
        raise NotImplementedError("evaluate() must be implemented by color subclasses.")

class SolidColor(ColorType):
    """A single constant color."""
    def __init__(self, color: Vector3):
        self.color = color

    def evaluate(self, rec: HitRecord) -> Vector3:
        return self.color

    def __repr__(self) -> str:
        return f"SolidColor({self.color!r})"

class NormalColor(ColorType):
    """Visualises the oriented surface normal, mapped from [-1, 1] to [0, 1]."""
    def evaluate(self, rec: HitRecord) -> Vector3:
        return rec.normal * 0.5 + Vector3(0.5, 0.5, 0.5)

    def __repr__(self) -> str:
        return "NormalColor()"

class CheckerColor(ColorType):
    """
    A 3D checker pattern: space is cut into cubes of side `size` and
    neighbouring cubes alternate between color1 and color2.
    """
    def __init__(self, color1: Vector3, color2: Vector3, size: float = 1.0):
        if size <= 0:
            raise ValueError(f"Checker cell size must be positive, got {size}")
        self.color1 = color1
        self.color2 = color2
        self.size = size

    def cell(self, p: Vector3):
        return (math.floor(p.x / self.size),
                math.floor(p.y / self.size),
                math.floor(p.z / self.size))

    def evaluate(self, rec: HitRecord) -> Vector3:
        i, j, k = self.cell(rec.p)
        return self.color1 if (i + j + k) % 2 == 0 else self.color2

    def __repr__(self) -> str:
        return f"CheckerColor({self.color1!r}, {self.color2!r}, {self.size})"

def as_color_type(color: Union[Vector3, ColorType]) -> ColorType:
    """Wraps a bare Vector3 in a SolidColor; ColorTypes pass through."""
    if isinstance(color, Vector3):
        return SolidColor(color)
    if isinstance(color, ColorType):
        return color
    raise TypeError(f"Expected Vector3 or ColorType, got {type(color).__name__}")
