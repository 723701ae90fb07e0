# materials/patterns.py
import math
from core.color import Color
from core.matrix import Matrix4, IDENTITY
from core.vector import Tuple
from materials.noise import make_permutation, turbulence


class Pattern:
    """
    Base class for all patterns.

    A pattern has its own transform, independent of the shape that wears it.
    color_at() takes a point in the pattern's parent space (the shape's
    object space, or an enclosing pattern's space) and pattern_at() a point
    already in pattern space.
    """
    def __init__(self, transform: Matrix4 = None):
        self.transform = transform if transform is not None else IDENTITY

    @property
    def transform(self) -> Matrix4:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix4):
        self.inverse = matrix.inverse()
        self._transform = matrix

    def pattern_at(self, p: Tuple) -> Color:
        raise NotImplementedError("pattern_at() must be implemented by pattern subclasses.")

    def color_at(self, p: Tuple) -> Color:
        return self.pattern_at(self.inverse * p)

    def color_at_shape(self, shape, world_point: Tuple) -> Color:
        return self.color_at(shape.world_to_object(world_point))


def as_pattern(value) -> Pattern:
    if isinstance(value, Pattern):
        return value
    return SolidPattern(value)


class SolidPattern(Pattern):
    """A single color everywhere."""
    def __init__(self, color: Color, **kwargs):
        super().__init__(**kwargs)
        self.color = color

    def pattern_at(self, p):
        return self.color


class TwoColorPattern(Pattern):
    """
    Shared base for patterns alternating between `a` and `b`. Either may be a
    Color or another Pattern, which is then evaluated with its own transform.
    """
    def __init__(self, a, b, **kwargs):
        super().__init__(**kwargs)
        self.a = as_pattern(a)
        self.b = as_pattern(b)

    def _pick(self, first: bool, p: Tuple) -> Color:
        return self.a.color_at(p) if first else self.b.color_at(p)


class StripePattern(TwoColorPattern):
    """Stripes along x, constant in y and z."""
    def pattern_at(self, p):
        return self._pick(math.floor(p.x) % 2 == 0, p)


class GradientPattern(TwoColorPattern):
    """Linear blend from a to b over each unit of x."""
    def pattern_at(self, p):
        ca = self.a.color_at(p)
        cb = self.b.color_at(p)
        fraction = p.x - math.floor(p.x)
        return ca + (cb - ca) * fraction


class RingPattern(TwoColorPattern):
    """Concentric rings in the xz plane (a bull's eye)."""
    def pattern_at(self, p):
        return self._pick(math.floor(math.sqrt(p.x * p.x + p.z * p.z)) % 2 == 0, p)


class CheckerPattern(TwoColorPattern):
    """3D checkers: unit cubes alternating in x, y and z."""
    def pattern_at(self, p):
        return self._pick((math.floor(p.x) + math.floor(p.y) + math.floor(p.z)) % 2 == 0, p)


class BlendedPattern(Pattern):
    """Average of two patterns, each evaluated with its own transform."""
    def __init__(self, a, b, **kwargs):
        super().__init__(**kwargs)
        self.a = as_pattern(a)
        self.b = as_pattern(b)

    def pattern_at(self, p):
        return (self.a.color_at(p) + self.b.color_at(p)) * 0.5


class PerturbedPattern(Pattern):
    """
    Jitters the lookup point with Perlin noise before delegating, which
    gives wrapped patterns an organic, wavy look.

    The noise is a pure function of the point and `seed`; renders are
    reproducible and safe to evaluate from any worker.
    """
    def __init__(self, pattern, scale: float = 0.2, octaves: int = 1, seed: int = 0, **kwargs):
        super().__init__(**kwargs)
        if octaves < 1:
            raise ValueError(f"octaves must be at least 1, got {octaves}")
        self.pattern = as_pattern(pattern)
        self.scale = scale
        self.octaves = octaves
        self.seed = seed
        self.permutation = make_permutation(seed)

    def offset(self, p: Tuple) -> Tuple:
        x, y, z = float(p.x), float(p.y), float(p.z)
        # Three decorrelated samples, one per axis.
        dx = turbulence(self.permutation, x, y, z, self.octaves)
        dy = turbulence(self.permutation, x, y, z + 1.7, self.octaves)
        dz = turbulence(self.permutation, x, y, z + 3.4, self.octaves)
        return Tuple(dx * self.scale, dy * self.scale, dz * self.scale, 0.0)

    def pattern_at(self, p):
        return self.pattern.color_at(p + self.offset(p))


class TestPattern(Pattern):
    """Returns the pattern-space point as a color. For checking transforms."""
    __test__ = False

    def pattern_at(self, p):
        return Color(p.x, p.y, p.z)
