# geometry/test_shape.py
from core.aabb import AABB
from core.vector import point, vector
from geometry.shape import Shape


class TestShape(Shape):
    """
    A shape that only records the object-space ray it was asked to intersect.
    Lets the world/object space plumbing in Shape be checked in isolation.
    """
    __test__ = False

    def __init__(self, **kwargs):
        self.saved_ray = None
        super().__init__(**kwargs)

    def local_intersect(self, ray):
        self.saved_ray = ray
        return []

    def local_normal_at(self, p, hit=None):
        return vector(p.x, p.y, p.z)

    def local_bounds(self) -> AABB:
        return AABB(point(-1, -1, -1), point(1, 1, 1))
