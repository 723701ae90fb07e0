# geometry/plane.py
import math
from core.aabb import AABB
from core.utils import EPSILON
from core.vector import point, vector
from geometry.intersection import Intersection
from geometry.shape import Shape

_UP = vector(0, 1, 0)


class Plane(Shape):
    """
    The infinite xz plane through the object-space origin.
    """
    def local_intersect(self, ray):
        if abs(ray.direction.y) < EPSILON:
            return []
        t = -ray.origin.y / ray.direction.y
        return [Intersection(t, self)]

    def local_normal_at(self, p, hit=None):
        return _UP

    def local_bounds(self) -> AABB:
        return AABB(point(-math.inf, 0, -math.inf), point(math.inf, 0, math.inf))
