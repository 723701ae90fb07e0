# materials/presets.py
from core.color import Color
from materials.material import Material
from materials.patterns import CheckerPattern, PerturbedPattern, StripePattern


class DielectricPresets:
    """Transparent materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Material:
        return Material(color=Color(0.1, 0.1, 0.1), diffuse=0.1, ambient=0.0, specular=1.0,
                        shininess=300, reflective=0.9, transparency=1.0, refractive_index=1.5)

    @staticmethod
    def water() -> Material:
        return DielectricPresets.glass().copy(refractive_index=1.333)

    @staticmethod
    def diamond() -> Material:
        return DielectricPresets.glass().copy(refractive_index=2.417)

    @staticmethod
    def air() -> Material:
        # For air bubbles inside other dielectrics.
        return Material(ambient=0.0, diffuse=0.0, specular=0.0, transparency=1.0,
                        reflective=0.0, refractive_index=1.00029)


class MetalPresets:
    """Reflective materials."""

    @staticmethod
    def mirror() -> Material:
        return Material(color=Color(0, 0, 0), ambient=0.0, diffuse=0.0, specular=1.0,
                        shininess=300, reflective=1.0)

    @staticmethod
    def chrome() -> Material:
        return Material(color=Color(0.9, 0.9, 0.9), ambient=0.05, diffuse=0.2, specular=1.0,
                        shininess=250, reflective=0.7)

    @staticmethod
    def gold() -> Material:
        return Material(color=Color(1.0, 0.78, 0.34), ambient=0.1, diffuse=0.5, specular=0.8,
                        shininess=120, reflective=0.3)

    @staticmethod
    def copper() -> Material:
        return Material(color=Color(0.95, 0.64, 0.54), ambient=0.1, diffuse=0.5, specular=0.7,
                        shininess=100, reflective=0.25)


class ColorPresets:
    """Common colors."""

    RED = Color(0.9, 0.2, 0.2)
    ORANGE = Color(0.9, 0.6, 0.1)
    YELLOW = Color(0.9, 0.9, 0.1)

    BLUE = Color(0.2, 0.3, 0.9)
    GREEN = Color(0.2, 0.8, 0.2)
    PURPLE = Color(0.6, 0.2, 0.8)

    WHITE = Color(0.9, 0.9, 0.9)
    GRAY = Color(0.5, 0.5, 0.5)
    BLACK = Color(0.1, 0.1, 0.1)

    @staticmethod
    def matte(color: Color) -> Material:
        """Create a matte material with the given color."""
        return Material(color=color, specular=0.0)


class PatternPresets:
    """Ready-made patterned materials."""

    @staticmethod
    def checkerboard(color1: Color = None, color2: Color = None, reflective: float = 0.0) -> Material:
        if color1 is None:
            color1 = ColorPresets.WHITE
        if color2 is None:
            color2 = ColorPresets.BLACK
        return Material(pattern=CheckerPattern(color1, color2), specular=0.0, reflective=reflective)

    @staticmethod
    def marble(scale: float = 0.3, octaves: int = 4, seed: int = 0) -> Material:
        """Perturbed stripes, which read as veined stone."""
        stripes = StripePattern(Color(0.85, 0.85, 0.8), Color(0.35, 0.35, 0.4))
        return Material(pattern=PerturbedPattern(stripes, scale=scale, octaves=octaves, seed=seed),
                        specular=0.3, shininess=50)
