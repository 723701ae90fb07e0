# geometry/sphere.py
import math
from core.aabb import AABB
from core.ray import Ray
from core.vector import point, vector
from geometry.intersection import Intersection
from geometry.shape import Shape
from materials.presets import DielectricPresets


class Sphere(Shape):
    """
    Unit sphere centred at the object-space origin. Size and position come
    from the transform.
    """
    def local_intersect(self, ray: Ray):
        oc = vector(ray.origin.x, ray.origin.y, ray.origin.z)
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - 1.0
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return []

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-half_b - sqrt_disc) / a
        t2 = (-half_b + sqrt_disc) / a
        return [Intersection(t1, self), Intersection(t2, self)]

    def local_normal_at(self, p, hit=None):
        return vector(p.x, p.y, p.z)

    def local_bounds(self) -> AABB:
        return AABB(point(-1, -1, -1), point(1, 1, 1))


def glass_sphere(**kwargs) -> Sphere:
    sphere = Sphere(**kwargs)
    sphere.material = DielectricPresets.glass()
    return sphere
