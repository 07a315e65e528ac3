# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.

    Built once from the outward geometric normal; the stored normal always
    points against the incoming ray and front_face says whether the ray
    arrived from outside.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material")

    def __init__(self, ray: Ray, t: float, outward_normal: Vector3, material):
        self.t = t                   # Ray parameter at intersection
        self.p = ray.at(t)           # Intersection point
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal
        self.material = material

    @property
    def point(self) -> Vector3:
        return self.p

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face})")

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Returns a HitRecord if the ray hits with t strictly inside
        (t_min, t_max), otherwise None.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
