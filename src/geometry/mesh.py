# geometry/mesh.py
import logging
from typing import List, Optional, Tuple
import numpy as np
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.world import World

logger = logging.getLogger(__name__)

class PlanarPrimitive(Hittable):
    """
    Base for flat primitives spanned by an anchor vertex and two edges.

    A hit is found by expressing the ray origin, relative to the anchor, in
    the basis (edge1, edge2, direction). The first two coordinates locate the
    point on the plane; the third, negated, is the ray parameter. A singular
    basis means the ray runs parallel to the plane and is a miss.
    """
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3, material):
        self.vertices = (v0, v1, v2)
        self.material = material
        self.edge1 = v1 - v0
        self.edge2 = v2 - v0
        self._normal = self.edge1.cross(self.edge2).normalize()

    def normal(self) -> Vector3:
        return self._normal

    def contains(self, u: float, v: float) -> bool:
        raise NotImplementedError("contains() must be implemented by subclasses.")

    def _solve(self, ray: Ray) -> Optional[Tuple[float, float, float]]:
        transform = np.column_stack((self.edge1.to_array(),
                                     self.edge2.to_array(),
                                     ray.direction.to_array()))
        try:
            transform_inv = np.linalg.inv(transform)
        except np.linalg.LinAlgError:
            return None
        local = transform_inv @ (ray.origin - self.vertices[0]).to_array()
        if not np.all(np.isfinite(local)):
            return None
        return float(local[0]), float(local[1]), float(-local[2])

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        solution = self._solve(ray)
        if solution is None:
            return None
        u, v, t = solution
        if not self.contains(u, v) or not t_min < t < t_max:
            return None
        return HitRecord(ray, t, self._normal, self.material)

    def __repr__(self) -> str:
        v0, v1, v2 = self.vertices
        return f"{type(self).__name__}({v0!r}, {v1!r}, {v2!r})"

class Triangle(PlanarPrimitive):
    """Triangle with vertices v0, v1, v2. Points on the edges are misses."""
    def contains(self, u: float, v: float) -> bool:
        return u > 0.0 and v > 0.0 and u + v < 1.0

class Parallelogram(PlanarPrimitive):
    """
    Parallelogram anchored at v0 with sides v0->v1 and v0->v2; the fourth
    corner is implied. Points on the edges are misses.
    """
    def contains(self, u: float, v: float) -> bool:
        return 0.0 < u < 1.0 and 0.0 < v < 1.0

def _face_vertex_index(token: str, vertex_count: int) -> int:
    # "7", "7/2" and "7/2/3" all name vertex 7; negative indices count back.
    index = int(token.split('/')[0])
    if index < 0:
        index += vertex_count
    else:
        index -= 1  # OBJ indices are 1-based
    if not 0 <= index < vertex_count:
        raise IndexError(f"vertex index {token} out of range")
    return index

def load_obj(filename: str, material) -> World:
    """
    Load the faces of a Wavefront OBJ file as Triangles sharing one material.

    Polygons are fan-triangulated (assumed convex). Texture coordinates and
    normals are ignored; triangle normals come from the winding order.
    """
    vertices: List[Vector3] = []
    triangles: List[Triangle] = []

    logger.info("Opening file: %s", filename)
    with open(filename, 'r') as f:
        for line_num, line in enumerate(f, 1):
            values = line.split()
            if not values or values[0].startswith('#'):
                continue
            try:
                if values[0] == 'v':  # Vertex
                    vertices.append(Vector3(float(values[1]), float(values[2]), float(values[3])))
                elif values[0] == 'f':  # Face
                    indices = [_face_vertex_index(v, len(vertices)) for v in values[1:]]
                    if len(indices) < 3:
                        raise ValueError("face needs at least three vertices")
                    for i in range(1, len(indices) - 1):
                        triangles.append(Triangle(vertices[indices[0]],
                                                  vertices[indices[i]],
                                                  vertices[indices[i + 1]],
                                                  material))
            except (ValueError, IndexError) as e:
                raise ValueError(f"{filename}:{line_num}: cannot parse {line.strip()!r}: {e}") from e

    logger.info("Loaded %d vertices, %d triangles", len(vertices), len(triangles))
    world = World()
    world.extend(triangles)
    return world
