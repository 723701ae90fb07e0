# geometry/triangle.py
from core.aabb import AABB
from core.errors import DegenerateShapeError
from core.utils import EPSILON
from core.vector import Tuple
from geometry.intersection import Intersection
from geometry.shape import Shape


class Triangle(Shape):
    """
    A flat triangle. Edges and the face normal are computed once at
    construction; intersections record barycentric (u, v).
    """
    def __init__(self, p1: Tuple, p2: Tuple, p3: Tuple, **kwargs):
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.e1 = p2 - p1
        self.e2 = p3 - p1
        face_normal = self.e2.cross(self.e1)
        if face_normal.magnitude() < EPSILON * EPSILON:
            raise DegenerateShapeError(f"Triangle vertices are collinear: {p1}, {p2}, {p3}")
        self.normal = face_normal.normalize()
        super().__init__(**kwargs)

    def local_intersect(self, ray):
        # Möller–Trumbore intersection algorithm
        dir_cross_e2 = ray.direction.cross(self.e2)
        det = self.e1.dot(dir_cross_e2)

        # If ray is parallel to triangle
        if abs(det) < EPSILON:
            return []

        f = 1.0 / det
        p1_to_origin = ray.origin - self.p1
        u = f * p1_to_origin.dot(dir_cross_e2)
        if u < 0 or u > 1:
            return []

        origin_cross_e1 = p1_to_origin.cross(self.e1)
        v = f * ray.direction.dot(origin_cross_e1)
        if v < 0 or (u + v) > 1:
            return []

        t = f * self.e2.dot(origin_cross_e1)
        return [Intersection(t, self, u, v)]

    def local_normal_at(self, p, hit=None):
        return self.normal

    def local_bounds(self) -> AABB:
        return AABB().add_point(self.p1).add_point(self.p2).add_point(self.p3)


class SmoothTriangle(Triangle):
    """Triangle whose normal is interpolated from per-vertex normals."""
    def __init__(self, p1: Tuple, p2: Tuple, p3: Tuple,
                 n1: Tuple, n2: Tuple, n3: Tuple, **kwargs):
        self.n1 = n1
        self.n2 = n2
        self.n3 = n3
        super().__init__(p1, p2, p3, **kwargs)

    def local_normal_at(self, p, hit=None):
        if hit is None or hit.u is None:
            return self.normal
        return self.n2 * hit.u + self.n3 * hit.v + self.n1 * (1 - hit.u - hit.v)
