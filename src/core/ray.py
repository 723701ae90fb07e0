# core/ray.py
from core.vector import Tuple


class Ray:
    """
    Represents a ray in 3D space with an origin point and a direction vector.
    The direction does not need to be unit length.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Tuple, direction: Tuple):
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "direction", direction)

    def __setattr__(self, name, value):
        raise AttributeError("Ray is immutable")

    def __getstate__(self):
        return (self.origin, self.direction)

    def __setstate__(self, state):
        object.__setattr__(self, "origin", state[0])
        object.__setattr__(self, "direction", state[1])

    def position(self, t: float) -> Tuple:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix) -> "Ray":
        return Ray(matrix * self.origin, matrix * self.direction)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
