# geometry/cylinder.py
import math
from core.aabb import AABB
from core.errors import DegenerateShapeError
from core.utils import EPSILON
from core.vector import point, vector
from geometry.intersection import Intersection
from geometry.shape import Shape


def check_cap(ray, t: float, radius: float) -> bool:
    """
    Whether the ray at t lies within `radius` of the y axis (closed disc).
    """
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= radius * radius


class Cylinder(Shape):
    """
    Radius 1 cylinder around the y axis, truncated to minimum < y < maximum.
    When `closed` the ends are capped.
    """
    def __init__(self, minimum: float = -math.inf, maximum: float = math.inf,
                 closed: bool = False, **kwargs):
        if minimum > maximum:
            raise DegenerateShapeError(f"Cylinder minimum {minimum} exceeds maximum {maximum}")
        if closed and not (math.isfinite(minimum) or math.isfinite(maximum)):
            raise DegenerateShapeError("A closed cylinder needs at least one finite bound")
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed
        super().__init__(**kwargs)

    def local_intersect(self, ray):
        xs = []
        a = ray.direction.x ** 2 + ray.direction.z ** 2
        # A ray parallel to the y axis can only hit the caps.
        if abs(a) >= EPSILON:
            b = 2 * ray.origin.x * ray.direction.x + 2 * ray.origin.z * ray.direction.z
            c = ray.origin.x ** 2 + ray.origin.z ** 2 - 1
            disc = b * b - 4 * a * c
            if disc < 0:
                return []
            sqrt_disc = math.sqrt(disc)
            t0 = (-b - sqrt_disc) / (2 * a)
            t1 = (-b + sqrt_disc) / (2 * a)
            if t0 > t1:
                t0, t1 = t1, t0
            for t in (t0, t1):
                y = ray.origin.y + t * ray.direction.y
                if self.minimum < y < self.maximum:
                    xs.append(Intersection(t, self))
        self._intersect_caps(ray, xs)
        return xs

    def _intersect_caps(self, ray, xs):
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return
        for y in (self.minimum, self.maximum):
            if not math.isfinite(y):
                continue
            t = (y - ray.origin.y) / ray.direction.y
            if check_cap(ray, t, 1.0):
                xs.append(Intersection(t, self))
        xs.sort(key=lambda i: i.t)

    def local_normal_at(self, p, hit=None):
        dist = p.x ** 2 + p.z ** 2
        if dist < 1 and p.y >= self.maximum - EPSILON:
            return vector(0, 1, 0)
        if dist < 1 and p.y <= self.minimum + EPSILON:
            return vector(0, -1, 0)
        return vector(p.x, 0, p.z)

    def local_bounds(self) -> AABB:
        return AABB(point(-1, self.minimum, -1), point(1, self.maximum, 1))
