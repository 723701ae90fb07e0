import math

import numpy as np
import pytest

from camera.camera import Camera
from core.color import Color, WHITE
from core.errors import RenderError
from core.transformations import translation, view_transform
from core.vector import point, vector
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.world import World
from lights.light import AreaLight
from materials.material import Material
from renderer.config import RenderSettings
from renderer.raytracer import Renderer, partition_rows, render_pixel


def soft_shadow_world():
    floor = Plane(transform=translation(0, -1, 0), material=Material(reflective=0.3))
    ball = Sphere(material=Material(color=Color(0.8, 0.3, 0.2)))
    light = AreaLight(point(-3, 4, -3), vector(1, 0, 0), 3, vector(0, 1, 0), 3, WHITE, seed=5)
    return World([floor, ball], [light])


def make_camera(width, height):
    return Camera(width, height, math.pi / 3,
                  view_transform(point(0, 1, -5), point(0, 0, 0), vector(0, 1, 0)))


def test_partition_rows():
    assert partition_rows(10, 4) == [(0, 4), (4, 8), (8, 10)]
    assert partition_rows(3, 8) == [(0, 3)]


def test_worker_count_does_not_change_the_image():
    camera = make_camera(8, 6)
    serial = Renderer(RenderSettings(workers=1, rows_per_task=2)).render(camera, soft_shadow_world())
    parallel = Renderer(RenderSettings(workers=2, rows_per_task=1)).render(camera, soft_shadow_world())
    assert np.array_equal(serial.pixels, parallel.pixels)
    assert serial.frozen and parallel.frozen
    assert serial.pixels.max() > 0


def test_render_is_repeatable():
    camera = make_camera(6, 4)
    settings = RenderSettings(rows_per_task=3)
    a = Renderer(settings).render(camera, soft_shadow_world())
    b = Renderer(settings).render(camera, soft_shadow_world())
    assert np.array_equal(a.pixels, b.pixels)


def test_antialias_one_is_pixel_centre(default_world):
    camera = make_camera(5, 5)
    centre = default_world.color_at(camera.ray_for_pixel(2, 2), 5)
    assert render_pixel(camera, default_world, 2, 2, 1, 5) == centre.as_tuple()


def test_antialias_averages_sub_pixels(default_world):
    camera = make_camera(5, 5)
    expected = np.zeros(3)
    for dy in (0.25, 0.75):
        for dx in (0.25, 0.75):
            expected += default_world.color_at(camera.ray_for_pixel(1, 2, dx, dy), 5).as_tuple()
    assert render_pixel(camera, default_world, 1, 2, 2, 5) == pytest.approx(tuple(expected / 4))


def test_light_overrides_leave_the_world_alone():
    world = soft_shadow_world()
    light = world.lights[0]
    renderer = Renderer(RenderSettings(shadow_samples=2, jitter=False))
    prepared = renderer.prepare_world(world)
    assert prepared is not world
    assert prepared.lights[0].samples == 4 and not prepared.lights[0].jitter
    assert world.lights[0] is light
    assert light.samples == 9 and light.jitter
    assert prepared.objects == world.objects


def test_divide_threshold_keeps_the_image():
    from geometry.group import Group
    def scene():
        g = Group([Sphere(transform=translation(x, 0, 0)) for x in (-2.5, 0, 2.5)])
        return World([g], soft_shadow_world().lights)
    camera = make_camera(6, 4)
    plain = Renderer(RenderSettings()).render(camera, scene())
    divided = Renderer(RenderSettings(divide_threshold=2)).render(camera, scene())
    assert np.allclose(plain.pixels, divided.pixels)


class FailingSphere(Sphere):
    """Breaks for every ray heading downwards."""

    def local_intersect(self, ray):
        if ray.direction.y < 0:
            raise RuntimeError("boom")
        return super().local_intersect(ray)


def test_failed_band_is_reported_after_the_rest_finish():
    world = World([FailingSphere()], [AreaLight(point(-10, 10, -10), vector(1, 0, 0), 1,
                                                 vector(0, 1, 0), 1, WHITE, jitter=False)])
    camera = Camera(4, 4, math.pi / 3,
                    view_transform(point(0, 0, -3), point(0, 0, 0), vector(0, 1, 0)))
    with pytest.raises(RenderError) as excinfo:
        Renderer(RenderSettings(workers=1, rows_per_task=2)).render(camera, world)
    err = excinfo.value
    assert err.failed_rows == [(2, 4)]
    assert "2-3" in str(err)
    assert err.canvas.frozen
    assert np.any(err.canvas.pixels[:2] > 0)
    assert not np.any(err.canvas.pixels[2:])
