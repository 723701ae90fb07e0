# materials/normal_perturbers.py
import math
from core.vector import Tuple, vector
from materials.noise import make_permutation, turbulence


class NormalPerturber:
    """
    Bends a shape's object-space normal. Called with the object-space point,
    returns a vector that is added to the normal before it is normalised.
    """
    def __call__(self, p: Tuple) -> Tuple:
        raise NotImplementedError("__call__() must be implemented by subclasses.")


class SinYPerturber(NormalPerturber):
    """Ripples along y: adds (0, sin(y * factor), 0)."""

    def __init__(self, factor: float = 1.0):
        self.factor = factor

    def __call__(self, p):
        return vector(0, math.sin(p.y * self.factor), 0)


class NoisePerturber(NormalPerturber):
    """
    Bumps the normal with seeded Perlin turbulence, one sample per axis.
    """
    def __init__(self, scale: float = 0.2, octaves: int = 1, seed: int = 0):
        if octaves < 1:
            raise ValueError(f"octaves must be at least 1, got {octaves}")
        self.scale = scale
        self.octaves = octaves
        self.seed = seed
        self.permutation = make_permutation(seed)

    def __call__(self, p):
        x, y, z = float(p.x), float(p.y), float(p.z)
        dx = turbulence(self.permutation, x, y, z, self.octaves)
        dy = turbulence(self.permutation, x + 5.3, y, z, self.octaves)
        dz = turbulence(self.permutation, x, y + 9.1, z, self.octaves)
        return vector(dx * self.scale, dy * self.scale, dz * self.scale)
