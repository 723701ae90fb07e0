# core/aabb.py
import math
import numpy as np
from core.vector import Tuple, point

INFINITY = math.inf


def check_axis(origin: float, direction: float, minimum: float, maximum: float):
    """
    Entry and exit t of a ray against one pair of slab planes.
    A ray parallel to the slab either lies inside it for all t or never.
    """
    if direction != 0.0:
        t0 = (minimum - origin) / direction
        t1 = (maximum - origin) / direction
        if t0 > t1:
            t0, t1 = t1, t0
        return t0, t1
    if minimum <= origin <= maximum:
        return -INFINITY, INFINITY
    return INFINITY, -INFINITY


class AABB:
    """
    Axis-aligned bounding box. A freshly created AABB() is empty and grows
    as points or other boxes are added.
    """
    def __init__(self, minimum: Tuple = None, maximum: Tuple = None):
        self.minimum = minimum if minimum is not None else point(INFINITY, INFINITY, INFINITY)
        self.maximum = maximum if maximum is not None else point(-INFINITY, -INFINITY, -INFINITY)

    def is_empty(self) -> bool:
        return (self.minimum.x > self.maximum.x or self.minimum.y > self.maximum.y
                or self.minimum.z > self.maximum.z)

    def add_point(self, p: Tuple) -> "AABB":
        return AABB(
            point(min(self.minimum.x, p.x), min(self.minimum.y, p.y), min(self.minimum.z, p.z)),
            point(max(self.maximum.x, p.x), max(self.maximum.y, p.y), max(self.maximum.z, p.z))
        )

    def contains_point(self, p: Tuple) -> bool:
        return (self.minimum.x <= p.x <= self.maximum.x
                and self.minimum.y <= p.y <= self.maximum.y
                and self.minimum.z <= p.z <= self.maximum.z)

    def contains_box(self, other: "AABB") -> bool:
        return self.contains_point(other.minimum) and self.contains_point(other.maximum)

    def intersection_interval(self, ray):
        """
        Slab method: returns (tmin, tmax) of the overlap of the three per-axis
        intervals. The ray hits the box iff tmin <= tmax.
        """
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x, self.minimum.x, self.maximum.x)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y, self.minimum.y, self.maximum.y)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z, self.minimum.z, self.maximum.z)
        return max(xtmin, ytmin, ztmin), min(xtmax, ytmax, ztmax)

    def hit(self, ray) -> bool:
        # Closed intervals, so a ray grazing a face or edge still counts.
        if self.is_empty():
            return False
        tmin, tmax = self.intersection_interval(ray)
        return tmin <= tmax

    def transform(self, matrix) -> "AABB":
        """
        Bounds of this box after transforming all eight corners. Axes that
        turn into NaN (infinite extents mixed by a rotation) become unbounded.
        """
        if self.is_empty():
            return AABB()
        lo = (self.minimum.x, self.minimum.y, self.minimum.z)
        hi = (self.maximum.x, self.maximum.y, self.maximum.z)
        corners = np.array([[x, y, z, 1.0]
                            for x in (lo[0], hi[0])
                            for y in (lo[1], hi[1])
                            for z in (lo[2], hi[2])])
        # Zero matrix entries must not turn an infinite coordinate into NaN.
        with np.errstate(invalid="ignore"):
            products = corners[:, None, :] * matrix.data[None, :, :]
            products = np.where(matrix.data[None, :, :] == 0.0, 0.0, products)
            moved = products.sum(axis=2)
        mins = moved[:, :3].min(axis=0)
        maxs = moved[:, :3].max(axis=0)
        unbounded = np.isnan(moved[:, :3]).any(axis=0)
        mins[unbounded] = -INFINITY
        maxs[unbounded] = INFINITY
        return AABB(point(*mins.tolist()), point(*maxs.tolist()))

    def longest_axis(self) -> int:
        extents = (self.maximum.x - self.minimum.x,
                   self.maximum.y - self.minimum.y,
                   self.maximum.z - self.minimum.z)
        return max(range(3), key=lambda axis: extents[axis])

    def split(self):
        """
        Cuts the box in half along its longest axis.
        """
        x0, y0, z0 = self.minimum.x, self.minimum.y, self.minimum.z
        x1, y1, z1 = self.maximum.x, self.maximum.y, self.maximum.z
        axis = self.longest_axis()
        if axis == 0:
            x0 = x1 = x0 + (x1 - x0) / 2.0
        elif axis == 1:
            y0 = y1 = y0 + (y1 - y0) / 2.0
        else:
            z0 = z1 = z0 + (z1 - z0) / 2.0
        left = AABB(self.minimum, point(x1, y1, z1))
        right = AABB(point(x0, y0, z0), self.maximum)
        return left, right

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    __hash__ = None

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = point(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = point(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)
