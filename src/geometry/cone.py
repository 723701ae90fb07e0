# geometry/cone.py
import math
from core.aabb import AABB
from core.errors import DegenerateShapeError
from core.utils import EPSILON
from core.vector import point, vector
from geometry.cylinder import check_cap
from geometry.intersection import Intersection
from geometry.shape import Shape


class Cone(Shape):
    """
    Double-napped cone x^2 + z^2 = y^2, truncated to minimum < y < maximum.
    The radius of each cap equals the |y| it sits at.
    """
    def __init__(self, minimum: float = -math.inf, maximum: float = math.inf,
                 closed: bool = False, **kwargs):
        if minimum > maximum:
            raise DegenerateShapeError(f"Cone minimum {minimum} exceeds maximum {maximum}")
        if closed and not (math.isfinite(minimum) or math.isfinite(maximum)):
            raise DegenerateShapeError("A closed cone needs at least one finite bound")
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed
        super().__init__(**kwargs)

    def local_intersect(self, ray):
        o, d = ray.origin, ray.direction
        a = d.x ** 2 - d.y ** 2 + d.z ** 2
        b = 2 * o.x * d.x - 2 * o.y * d.y + 2 * o.z * d.z
        c = o.x ** 2 - o.y ** 2 + o.z ** 2
        ts = []
        if abs(a) < EPSILON:
            # Ray parallel to one of the nappes: at most one body hit.
            if abs(b) >= EPSILON:
                ts.append(-c / (2 * b))
        else:
            disc = b * b - 4 * a * c
            if disc >= 0:
                sqrt_disc = math.sqrt(disc)
                t0 = (-b - sqrt_disc) / (2 * a)
                t1 = (-b + sqrt_disc) / (2 * a)
                ts.extend(sorted((t0, t1)))

        xs = []
        for t in ts:
            y = o.y + t * d.y
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
            if check_cap(ray, t, abs(y)):
                xs.append(Intersection(t, self))
        xs.sort(key=lambda i: i.t)

    def local_normal_at(self, p, hit=None):
        dist = p.x ** 2 + p.z ** 2
        if dist < self.maximum ** 2 and p.y >= self.maximum - EPSILON:
            return vector(0, 1, 0)
        if dist < self.minimum ** 2 and p.y <= self.minimum + EPSILON:
            return vector(0, -1, 0)
        y = math.sqrt(dist)
        if p.y > 0:
            y = -y
        return vector(p.x, y, p.z)

    def local_bounds(self) -> AABB:
        limit = max(abs(self.minimum), abs(self.maximum))
        return AABB(point(-limit, self.minimum, -limit), point(limit, self.maximum, limit))
