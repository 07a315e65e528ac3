from geometry.hittable import HitRecord, Hittable
from geometry.sphere import Sphere
from geometry.world import World
from geometry.mesh import Parallelogram, PlanarPrimitive, Triangle, load_obj

__all__ = [
    "HitRecord",
    "Hittable",
    "Sphere",
    "World",
    "PlanarPrimitive",
    "Triangle",
    "Parallelogram",
    "load_obj",
]
