import math

import pytest

from core.aabb import AABB
from core.ray import Ray
from core.transformations import rotation_x, rotation_y, translation
from core.vector import point, vector
from geometry.plane import Plane


def test_empty_box_grows_with_points():
    box = AABB()
    assert box.is_empty()
    box = box.add_point(point(-5, 2, 0)).add_point(point(7, 0, -3))
    assert not box.is_empty()
    assert box.minimum == point(-5, 0, -3)
    assert box.maximum == point(7, 2, 0)


def test_empty_box_is_never_hit():
    assert not AABB().hit(Ray(point(0, 0, -5), vector(0, 0, 1)))


def test_surrounding_box_and_containment():
    box = AABB.surrounding_box(AABB(point(-5, -2, 0), point(7, 4, 4)),
                               AABB(point(8, -7, -2), point(14, 2, 8)))
    assert box.minimum == point(-5, -7, -2)
    assert box.maximum == point(14, 4, 8)
    assert box.contains_point(point(0, 0, 0))
    assert not box.contains_point(point(15, 0, 0))
    assert box.contains_box(AABB(point(0, 0, 0), point(1, 1, 1)))
    assert not box.contains_box(AABB(point(0, 0, 0), point(20, 1, 1)))


def test_transformed_box():
    box = AABB(point(-1, -1, -1), point(1, 1, 1))
    moved = box.transform(rotation_x(math.pi / 4) * rotation_y(math.pi / 4))
    lo = (moved.minimum.x, moved.minimum.y, moved.minimum.z)
    hi = (moved.maximum.x, moved.maximum.y, moved.maximum.z)
    assert lo == pytest.approx((-1.41421, -1.70711, -1.70711), abs=1e-4)
    assert hi == pytest.approx((1.41421, 1.70711, 1.70711), abs=1e-4)


def test_infinite_bounds_stay_valid_when_transformed():
    bounds = Plane().parent_space_bounds()
    assert bounds.minimum.x == -math.inf and bounds.maximum.z == math.inf
    moved = AABB(bounds.minimum, bounds.maximum).transform(translation(1, 2, 3))
    assert moved.minimum.y == pytest.approx(2)
    assert moved.maximum.y == pytest.approx(2)
    rotated = bounds.transform(rotation_x(math.pi / 2))
    for c in (rotated.minimum.x, rotated.minimum.y, rotated.minimum.z):
        assert not math.isnan(c)


@pytest.mark.parametrize("origin, direction, expected", [
    (point(5, 0.5, 0), vector(-1, 0, 0), True),
    (point(-5, 0.5, 0), vector(1, 0, 0), True),
    (point(0.5, 5, 0), vector(0, -1, 0), True),
    (point(0, 0.5, 0), vector(0, 0, 1), True),
    (point(-2, 0, 0), vector(2, 4, 6), False),
    (point(2, 0, 2), vector(0, 0, -1), False),
    (point(0, 2, 2), vector(0, -1, 0), False),
    # Grazing an edge counts as a hit.
    (point(1, 1, -5), vector(0, 0, 1), True),
])
def test_ray_against_box(origin, direction, expected):
    box = AABB(point(-1, -1, -1), point(1, 1, 1))
    assert box.hit(Ray(origin, direction.normalize())) is expected


def test_split_along_longest_axis():
    box = AABB(point(-1, -4, -5), point(9, 6, 5))
    left, right = box.split()
    assert left.minimum == point(-1, -4, -5)
    assert left.maximum == point(4, 6, 5)
    assert right.minimum == point(4, -4, -5)
    assert right.maximum == point(9, 6, 5)


def test_short_direction_is_not_treated_as_parallel():
    box = AABB(point(-1, -1, -1), point(1, 1, 1))
    tmin, tmax = box.intersection_interval(Ray(point(0, 0, -5), vector(0, 0, 5e-6)))
    assert (tmin, tmax) == pytest.approx((8e5, 1.2e6))
    assert box.hit(Ray(point(0, 0, -5), vector(0, 0, 5e-6)))


def test_parallel_ray_outside_a_slab_misses():
    box = AABB(point(-1, -1, -1), point(1, 1, 1))
    ray = Ray(point(0, 5, -5), vector(0, 0, 5e-6))
    tmin, tmax = box.intersection_interval(ray)
    assert tmin > tmax
    assert not box.hit(ray)
