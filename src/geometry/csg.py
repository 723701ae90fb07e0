# geometry/csg.py
from core.aabb import AABB
from core.errors import SceneError
from geometry.shape import Shape

OPERATIONS = ("union", "intersection", "difference")


def intersection_allowed(operation: str, lhit: bool, inl: bool, inr: bool) -> bool:
    """
    Truth table for CSG: whether a hit on the left (lhit) or right operand
    survives, given whether the ray is currently inside the left (inl) and
    right (inr) operands.
    """
    if operation == "union":
        return (lhit and not inr) or (not lhit and not inl)
    if operation == "intersection":
        return (lhit and inr) or (not lhit and inl)
    if operation == "difference":
        return (lhit and not inr) or (not lhit and inl)
    return False


class CSG(Shape):
    """
    Constructive solid geometry: union, intersection or difference of two shapes.
    """
    def __init__(self, operation: str, left: Shape, right: Shape, **kwargs):
        if operation not in OPERATIONS:
            raise SceneError(f"Unknown CSG operation {operation!r}; expected one of {OPERATIONS}")
        self.operation = operation
        self.left = left
        self.right = right
        self._bounds = None
        super().__init__(**kwargs)
        self.material = None
        left.parent = self
        right.parent = self

    def filter_intersections(self, xs):
        inl = False
        inr = False
        result = []
        for i in xs:
            lhit = self.left.includes(i.object)
            if intersection_allowed(self.operation, lhit, inl, inr):
                result.append(i)
            if lhit:
                inl = not inl
            else:
                inr = not inr
        return result

    def invalidate_bounds(self):
        self._bounds = None
        super().invalidate_bounds()

    def local_bounds(self) -> AABB:
        if self._bounds is None:
            self._bounds = AABB.surrounding_box(self.left.parent_space_bounds(),
                                                self.right.parent_space_bounds())
        return self._bounds

    def local_intersect(self, ray):
        if not self.local_bounds().hit(ray):
            return []
        xs = self.left.intersect(ray) + self.right.intersect(ray)
        xs.sort(key=lambda i: i.t)
        return self.filter_intersections(xs)

    def local_normal_at(self, p, hit=None):
        raise TypeError("CSG shapes have no surface; normals come from their operands")

    def includes(self, other: Shape) -> bool:
        return self.left.includes(other) or self.right.includes(other)
