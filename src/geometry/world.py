# geometry/world.py
from typing import Iterable, Iterator, List, Optional
from geometry.hittable import Hittable, HitRecord
from core.ray import Ray

class World(Hittable):
    """
    An ordered collection of Hittable objects, itself Hittable.

    hit() returns the nearest intersection; when two objects report the same
    t, the one added first wins.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def extend(self, objects: Iterable[Hittable]):
        self.objects.extend(objects)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
