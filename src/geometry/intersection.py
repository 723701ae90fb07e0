# geometry/intersection.py
import math
from typing import List, Optional
from core.ray import Ray
from core.utils import EPSILON
from core.vector import Tuple


class Intersection:
    """
    A ray parameter t and the primitive it hit. Triangles also record the
    barycentric u, v of the hit for smooth-normal interpolation.
    """
    __slots__ = ("t", "object", "u", "v")

    def __init__(self, t: float, obj, u: Optional[float] = None, v: Optional[float] = None):
        self.t = t
        self.object = obj
        self.u = u
        self.v = v

    def __lt__(self, other: "Intersection") -> bool:
        return self.t < other.t

    def __repr__(self) -> str:
        return f"Intersection({self.t}, {type(self.object).__name__})"


def intersections(*xs: Intersection) -> List[Intersection]:
    return sorted(xs, key=lambda i: i.t)


def hit(xs: List[Intersection]) -> Optional[Intersection]:
    """
    The visible intersection: smallest positive t. xs must be sorted.
    """
    for i in xs:
        if i.t > 0:
            return i
    return None


class Computations:
    """
    Everything the shading engine needs to know about a hit, precomputed once.
    """
    def __init__(self, t, obj, point, eyev, normalv, inside, over_point, under_point,
                 reflectv, n1, n2):
        self.t = t
        self.object = obj
        self.point = point
        self.eyev = eyev
        self.normalv = normalv
        self.inside = inside
        self.over_point = over_point
        self.under_point = under_point
        self.reflectv = reflectv
        self.n1 = n1
        self.n2 = n2


def _refractive_indices(target: Intersection, xs: List[Intersection]):
    # Walk the sorted intersections tracking which objects the ray is inside;
    # n1 is the medium being left at the target hit, n2 the one being entered.
    containers = []
    n1 = n2 = 1.0
    for i in xs:
        if i is target:
            n1 = containers[-1].material.refractive_index if containers else 1.0
        if any(c is i.object for c in containers):
            containers = [c for c in containers if c is not i.object]
        else:
            containers.append(i.object)
        if i is target:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break
    return n1, n2


def prepare_computations(intersection: Intersection, ray: Ray,
                         xs: Optional[List[Intersection]] = None) -> Computations:
    obj = intersection.object
    point = ray.position(intersection.t)
    eyev = (-ray.direction).normalize()
    normalv = obj.normal_at(point, intersection)
    inside = False
    if normalv.dot(eyev) < 0:
        inside = True
        normalv = -normalv
    offset = normalv * EPSILON
    n1, n2 = _refractive_indices(intersection, xs if xs is not None else [intersection])
    return Computations(
        t=intersection.t,
        obj=obj,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        over_point=point + offset,
        under_point=point - offset,
        reflectv=ray.direction.reflect(normalv),
        n1=n1,
        n2=n2,
    )


def schlick(comps: Computations) -> float:
    """
    Schlick's approximation of the Fresnel reflectance at the hit.
    """
    cos = comps.eyev.dot(comps.normalv)
    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n * n * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)
    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1 - r0) * (1 - cos) ** 5
