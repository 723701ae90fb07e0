# main.py
import logging
import math
import sys
from core.color import Color
from core.transformations import chain, rotation_x, rotation_y, scaling, translation, view_transform
from core.vector import point, vector
from camera.camera import Camera
from geometry.csg import CSG
from geometry.cube import Cube
from geometry.cylinder import Cylinder
from geometry.group import Group
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from geometry.world import World
from lights.light import AreaLight, PointLight
from materials.presets import ColorPresets, DielectricPresets, MetalPresets, PatternPresets
from renderer.config import QUALITY_LEVELS, RenderSettings, default_workers
from renderer.raytracer import Renderer

logger = logging.getLogger(__name__)


def create_world(soft_shadows: bool = True) -> World:
    world = World()

    # Checkered floor
    floor = Plane(material=PatternPresets.checkerboard(reflective=0.1))
    world.add(floor)
    logger.debug("Added checkered floor")

    # Marble sphere
    world.add(Sphere(transform=translation(-2.5, 1, 1.5),
                     material=PatternPresets.marble(scale=0.3, octaves=4)))

    # Glass sphere with an air bubble inside
    glass = Sphere(transform=translation(0, 1, 0), material=DielectricPresets.glass())
    glass.casts_shadow = False
    world.add(glass)
    bubble = Sphere(transform=chain(scaling(0.5, 0.5, 0.5), translation(0, 1, 0)),
                    material=DielectricPresets.air())
    bubble.casts_shadow = False
    world.add(bubble)

    # Mirror and gold spheres
    world.add(Sphere(transform=chain(scaling(0.7, 0.7, 0.7), translation(2.2, 0.7, 1)),
                     material=MetalPresets.mirror()))
    world.add(Sphere(transform=chain(scaling(0.5, 0.5, 0.5), translation(1.2, 0.5, -1.5)),
                     material=MetalPresets.gold()))

    # A cube with a cylinder bored through it
    bored = CSG("difference",
                Cube(material=ColorPresets.matte(ColorPresets.RED)),
                Cylinder(minimum=-2, maximum=2, closed=True,
                         transform=chain(scaling(0.5, 1, 0.5), rotation_x(math.pi / 2)),
                         material=ColorPresets.matte(ColorPresets.ORANGE)),
                transform=chain(scaling(0.6, 0.6, 0.6), rotation_y(math.pi / 5),
                                translation(-1.5, 0.6, -2)))
    world.add(bored)

    # A small pyramid of triangles
    pyramid = Group(transform=translation(3, 0, -3))
    apex = point(0, 1.5, 0)
    base = [point(-1, 0, -1), point(1, 0, -1), point(1, 0, 1), point(-1, 0, 1)]
    for i in range(4):
        pyramid.add_child(Triangle(base[i], base[(i + 1) % 4], apex,
                                   material=ColorPresets.matte(ColorPresets.BLUE)))
    world.add(pyramid)
    logger.debug("Created world with %d objects", len(world.objects))

    if soft_shadows:
        world.add_light(AreaLight(point(-6, 8, -8), vector(2, 0, 0), 4, vector(0, 2, 0), 4,
                                  Color(1, 1, 1)))
    else:
        world.add_light(PointLight(point(-5, 9, -9), Color(1, 1, 1)))
    return world


def create_camera(settings: RenderSettings) -> Camera:
    transform = view_transform(point(0, 2.5, -8), point(0, 0.8, 0), vector(0, 1, 0))
    return Camera.from_settings(settings, transform)


def main(quality: str = "draft", output: str = "render.png", workers: int = None):
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if quality not in QUALITY_LEVELS:
        logger.error("Unknown quality %r; choose from %s", quality, ", ".join(QUALITY_LEVELS))
        return 2

    settings = RenderSettings.from_quality(
        quality, workers=workers if workers is not None else default_workers())
    world = create_world(soft_shadows=quality != "draft")
    camera = create_camera(settings)
    canvas = Renderer(settings).render(camera, world)
    canvas.save(output)
    logger.info("Saved %s", output)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:3]))
