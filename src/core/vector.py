# core/vector.py
import math
import numpy as np

class Vector3:
    """
    A simple 3D vector class supporting arithmetic, dot and cross products,
    normalization and conversion to and from numpy arrays.

    Vectors are treated as values: no operation mutates its operands.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def from_array(values) -> "Vector3":
        return Vector3(values[0], values[1], values[2])

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        # Scalars scale, vectors multiply component-wise.
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __getitem__(self, axis: int) -> float:
        return (self.x, self.y, self.z)[axis]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def near_zero(self, eps: float = 1e-8) -> bool:
        """True if every component is within eps of zero."""
        return abs(self.x) < eps and abs(self.y) < eps and abs(self.z) < eps

    def isclose(self, other: "Vector3", abs_tol: float = 1e-9) -> bool:
        return (math.isclose(self.x, other.x, abs_tol=abs_tol) and
                math.isclose(self.y, other.y, abs_tol=abs_tol) and
                math.isclose(self.z, other.z, abs_tol=abs_tol))

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
