# lights/light.py
from typing import List
import numpy as np
from core.color import Color
from core.errors import SceneError
from core.vector import Tuple

# Shaded points are quantised to this many steps per unit before seeding the
# jitter generator.
JITTER_QUANTUM = 1e6


class PointLight:
    """
    A light with no size. Shadows it casts are hard.
    """
    usteps = 1
    vsteps = 1
    samples = 1

    def __init__(self, position: Tuple, intensity: Color):
        self.position = position
        self.intensity = intensity

    def sample_points(self, shaded_point: Tuple) -> List[Tuple]:
        return [self.position]

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointLight):
            return NotImplemented
        return self.position == other.position and self.intensity == other.intensity

    __hash__ = None

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.intensity!r})"


class AreaLight:
    """
    A rectangular light made of usteps x vsteps cells. Each cell contributes
    one sample position; with `jitter` the position is randomised inside its
    cell, otherwise the cell centre is used.

    Jitter offsets come from a generator seeded by `seed` and the shaded
    point, so a given point always sees the same samples regardless of which
    worker shades it or in what order.
    """
    def __init__(self, corner: Tuple, full_uvec: Tuple, usteps: int, full_vvec: Tuple,
                 vsteps: int, intensity: Color, jitter: bool = True, seed: int = 0):
        if usteps < 1 or vsteps < 1:
            raise SceneError(f"Area light needs at least one step per edge, got {usteps}x{vsteps}")
        if full_uvec.cross(full_vvec).magnitude() == 0:
            raise SceneError("Area light edges must span a rectangle")
        self.corner = corner
        self.full_uvec = full_uvec
        self.full_vvec = full_vvec
        self.uvec = full_uvec / usteps
        self.usteps = usteps
        self.vvec = full_vvec / vsteps
        self.vsteps = vsteps
        self.samples = usteps * vsteps
        self.intensity = intensity
        self.jitter = jitter
        self.seed = seed
        self.position = corner + (full_uvec + full_vvec) * 0.5

    def point_on_light(self, u: int, v: int, offset=(0.5, 0.5)) -> Tuple:
        """
        World position of a sample inside cell (u, v); `offset` is the
        position within the cell, 0..1 on each edge.
        """
        return self.corner + self.uvec * (u + offset[0]) + self.vvec * (v + offset[1])

    def jitter_offsets(self, shaded_point: Tuple) -> np.ndarray:
        key = [int(round(c * JITTER_QUANTUM)) & 0xFFFFFFFFFFFFFFFF
               for c in (shaded_point.x, shaded_point.y, shaded_point.z)]
        rng = np.random.default_rng([self.seed] + key)
        return rng.random((self.vsteps, self.usteps, 2))

    def sample_points(self, shaded_point: Tuple) -> List[Tuple]:
        if not self.jitter:
            return [self.point_on_light(u, v)
                    for v in range(self.vsteps) for u in range(self.usteps)]
        offsets = self.jitter_offsets(shaded_point)
        return [self.point_on_light(u, v, (float(offsets[v, u, 0]), float(offsets[v, u, 1])))
                for v in range(self.vsteps) for u in range(self.usteps)]

    def with_sampling(self, usteps: int = None, vsteps: int = None, jitter: bool = None) -> "AreaLight":
        """A copy of this light with a different sample grid or jitter setting."""
        return AreaLight(self.corner, self.full_uvec,
                         usteps if usteps is not None else self.usteps,
                         self.full_vvec,
                         vsteps if vsteps is not None else self.vsteps,
                         self.intensity,
                         jitter=self.jitter if jitter is None else jitter,
                         seed=self.seed)

    def __repr__(self) -> str:
        return (f"AreaLight(corner={self.corner!r}, uvec={self.full_uvec!r}x{self.usteps}, "
                f"vvec={self.full_vvec!r}x{self.vsteps}, jitter={self.jitter})")
