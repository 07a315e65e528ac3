# core/utils.py
import math
import random
from core.vector import Vector3

# Random sources are anything exposing random() and uniform(a, b): the
# random module itself or a per-worker random.Random instance.

def random_in_unit_sphere(rng=random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng=random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        if not p.near_zero():
            return p.normalize()

def random_cosine_direction(normal: Vector3, rng=random) -> Vector3:
    """
    Cosine-weighted direction about the normal, built by offsetting the
    normal with a unit vector. May be (numerically) zero; callers handle it.
    """
    return normal + random_unit_vector(rng)

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(v: Vector3, n: Vector3, ratio: float) -> Vector3:
    """
    Refracts v through a surface with normal n using Snell's law, split into
    the components perpendicular and parallel to the normal.
    """
    unit_v = v.normalize()
    cos_theta = min(-unit_v.dot(n), 1.0)
    r_out_perp = (unit_v + n * cos_theta) * ratio
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.dot(r_out_perp))))
    return r_out_perp + r_out_parallel

def schlick(cos_theta: float, ratio: float) -> float:
    """Schlick's approximation of the Fresnel reflectance."""
    r0 = (1.0 - ratio) / (1.0 + ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
