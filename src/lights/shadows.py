# lights/shadows.py
from core.ray import Ray
from core.utils import EPSILON
from core.vector import Tuple


def is_shadowed(world, light_position: Tuple, point: Tuple) -> bool:
    """
    Whether any shadow-casting object lies strictly between `point` and the
    light position.
    """
    v = light_position - point
    distance = v.magnitude()
    ray = Ray(point, v.normalize())
    for i in world.intersect(ray):
        if i.t <= EPSILON:
            continue
        if i.t >= distance:
            return False
        if i.object.casts_shadow:
            return True
    return False


def intensity_at(light, world, point: Tuple) -> float:
    """
    Fraction of the light visible from `point`, in [0, 1]. Point lights give
    exactly 0.0 or 1.0; area lights the share of unoccluded samples.
    """
    samples = light.sample_points(point)
    visible = sum(1 for position in samples if not is_shadowed(world, position, point))
    return visible / len(samples)
