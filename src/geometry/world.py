# geometry/world.py
import logging
from typing import List, Optional
from core.ray import Ray
from geometry.bvh import divide
from geometry.intersection import Intersection
from geometry.shape import Shape
from renderer.shading import MAX_DEPTH, color_at

logger = logging.getLogger(__name__)


class World:
    """
    The scene: an ordered list of shapes and an ordered list of lights.
    """
    def __init__(self, objects: Optional[List[Shape]] = None, lights=None):
        self.objects: List[Shape] = list(objects) if objects else []
        self.lights = list(lights) if lights else []

    def add(self, obj: Shape) -> Shape:
        self.objects.append(obj)
        return obj

    def add_light(self, light):
        self.lights.append(light)
        return light

    def intersect(self, ray: Ray) -> List[Intersection]:
        xs = []
        for obj in self.objects:
            xs.extend(obj.intersect(ray))
        xs.sort(key=lambda i: i.t)
        return xs

    def color_at(self, ray: Ray, remaining: int = MAX_DEPTH):
        return color_at(self, ray, remaining)

    def with_lights(self, lights) -> "World":
        """A world sharing this one's objects but lit by `lights`."""
        return World(self.objects, lights)

    def prepare(self, divide_threshold: Optional[int] = None):
        """
        Builds the cached data rendering relies on: optionally subdivides
        large groups, then computes every group and CSG bounding box so
        workers only ever read them.
        """
        if divide_threshold is not None:
            for obj in self.objects:
                divide(obj, divide_threshold)
            logger.debug("Subdivided groups with at least %d children", divide_threshold)
        for obj in self.objects:
            obj.parent_space_bounds()
        return self

    def __repr__(self) -> str:
        return f"World({len(self.objects)} objects, {len(self.lights)} lights)"
