"""Pytest configuration and shared fixtures."""

import pytest

from core.color import Color
from core.transformations import scaling
from core.vector import point
from geometry.sphere import Sphere
from geometry.world import World
from lights.light import PointLight
from materials.material import Material


def make_default_world():
    light = PointLight(point(-10, 10, -10), Color(1, 1, 1))
    outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
    return World([outer, inner], [light])


@pytest.fixture
def default_world():
    """Two concentric spheres lit by a white point light up and to the left."""
    return make_default_world()


@pytest.fixture
def temp_output_dir(tmp_path):
    """Provide a temporary directory for rendered images."""
    out = tmp_path / "outputs"
    out.mkdir()
    return out
