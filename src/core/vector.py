# core/vector.py
import math
from core.utils import float_equal


class Tuple:
    """
    A homogeneous 4-component tuple. w == 1.0 marks a point and w == 0.0 a
    vector; adding a vector to a point yields a point, subtracting two points
    yields a vector.
    """
    def __init__(self, x: float, y: float, z: float, w: float):
        self.x = x
        self.y = y
        self.z = z
        self.w = w

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __add__(self, other: "Tuple") -> "Tuple":
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Tuple":
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, t: float) -> "Tuple":
        return Tuple(self.x * t, self.y * t, self.z * t, self.w * t)

    def __rmul__(self, t: float) -> "Tuple":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Tuple":
        return Tuple(self.x / t, self.y / t, self.z / t, self.w / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (float_equal(self.x, other.x) and float_equal(self.y, other.y)
                and float_equal(self.z, other.z) and float_equal(self.w, other.w))

    __hash__ = None

    def dot(self, other: "Tuple") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Tuple") -> "Tuple":
        if self.w != 0.0 or other.w != 0.0:
            raise ValueError("cross product is only defined for vectors")
        return Tuple(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            0.0
        )

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> "Tuple":
        if self.w != 0.0:
            raise ValueError("cannot normalize a point")
        l = self.magnitude()
        if l == 0:
            return Tuple(0.0, 0.0, 0.0, 0.0)
        return Tuple(self.x / l, self.y / l, self.z / l, 0.0)

    def reflect(self, normal: "Tuple") -> "Tuple":
        """
        Reflects this vector about the normal.
        """
        return self - normal * 2 * self.dot(normal)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __repr__(self) -> str:
        if self.w == 1.0:
            return f"point({self.x}, {self.y}, {self.z})"
        if self.w == 0.0:
            return f"vector({self.x}, {self.y}, {self.z})"
        return f"Tuple({self.x}, {self.y}, {self.z}, {self.w})"


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(float(x), float(y), float(z), 0.0)


ORIGIN = point(0, 0, 0)
