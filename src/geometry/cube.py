# geometry/cube.py
from core.aabb import AABB
from core.vector import point, vector
from geometry.intersection import Intersection
from geometry.shape import Shape

_UNIT_BOX = AABB(point(-1, -1, -1), point(1, 1, 1))


class Cube(Shape):
    """
    Axis-aligned cube spanning -1..1 on every axis in object space.
    """
    def local_intersect(self, ray):
        tmin, tmax = _UNIT_BOX.intersection_interval(ray)
        if tmin > tmax:
            return []
        return [Intersection(tmin, self), Intersection(tmax, self)]

    def local_normal_at(self, p, hit=None):
        ax, ay, az = abs(p.x), abs(p.y), abs(p.z)
        maxc = max(ax, ay, az)
        if maxc == ax:
            return vector(p.x, 0, 0)
        if maxc == ay:
            return vector(0, p.y, 0)
        return vector(0, 0, p.z)

    def local_bounds(self) -> AABB:
        return _UNIT_BOX
