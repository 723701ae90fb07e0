# materials/material.py
from typing import Optional
from core.color import Color, WHITE
from core.errors import SceneError


class Material:
    """
    Phong surface parameters plus the reflective/refractive properties used
    by the recursive shading engine. An optional pattern overrides `color`;
    an optional normal perturber bends the surface normal.
    """
    def __init__(self, color: Color = WHITE, ambient: float = 0.1, diffuse: float = 0.9,
                 specular: float = 0.9, shininess: float = 200.0, reflective: float = 0.0,
                 transparency: float = 0.0, refractive_index: float = 1.0, pattern=None,
                 normal_perturber=None):
        for name, value in (("ambient", ambient), ("diffuse", diffuse), ("specular", specular)):
            if value < 0.0:
                raise SceneError(f"{name} must not be negative, got {value}")
        for name, value in (("reflective", reflective), ("transparency", transparency)):
            if not 0.0 <= value <= 1.0:
                raise SceneError(f"{name} must be within [0, 1], got {value}")
        if shininess <= 0.0:
            raise SceneError(f"shininess must be positive, got {shininess}")
        if refractive_index <= 0.0:
            raise SceneError(f"refractive_index must be positive, got {refractive_index}")
        self.color = color
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.reflective = reflective
        self.transparency = transparency
        self.refractive_index = refractive_index
        self.pattern = pattern
        self.normal_perturber = normal_perturber

    def color_at(self, shape, world_point) -> Color:
        """
        Surface color at a world-space point on `shape`, honouring the pattern.
        """
        if self.pattern is None:
            return self.color
        return self.pattern.color_at_shape(shape, world_point)

    def copy(self, **changes) -> "Material":
        values = dict(color=self.color, ambient=self.ambient, diffuse=self.diffuse,
                      specular=self.specular, shininess=self.shininess,
                      reflective=self.reflective, transparency=self.transparency,
                      refractive_index=self.refractive_index, pattern=self.pattern,
                      normal_perturber=self.normal_perturber)
        values.update(changes)
        return Material(**values)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (self.color == other.color and self.ambient == other.ambient
                and self.diffuse == other.diffuse and self.specular == other.specular
                and self.shininess == other.shininess and self.reflective == other.reflective
                and self.transparency == other.transparency
                and self.refractive_index == other.refractive_index
                and self.pattern is other.pattern
                and self.normal_perturber is other.normal_perturber)

    __hash__ = None

    def __repr__(self) -> str:
        return (f"Material(color={self.color!r}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess}, "
                f"reflective={self.reflective}, transparency={self.transparency}, "
                f"refractive_index={self.refractive_index})")
