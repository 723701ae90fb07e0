# geometry/shape.py
from typing import List, Optional
from core.aabb import AABB
from core.matrix import Matrix4, IDENTITY
from core.ray import Ray
from core.vector import Tuple, vector
from geometry.intersection import Intersection
from materials.material import Material


class Shape:
    """
    Abstract base for everything a ray can hit.

    Subclasses implement the three object-space capabilities:
    local_intersect(), local_normal_at() and local_bounds(). Moving between
    world and object space, including through parent groups, lives here.

    `parent` is a non-owning back reference set by Group/CSG when the shape is
    added; shapes never own their parent.
    """
    def __init__(self, transform: Matrix4 = None, material: Optional[Material] = None):
        self.parent = None
        self.casts_shadow = True
        self.material = material if material is not None else Material()
        self.transform = transform if transform is not None else IDENTITY

    @property
    def transform(self) -> Matrix4:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix4):
        # inverse() raises NonInvertibleTransformError for singular matrices,
        # so a bad transform is rejected while the scene is being built.
        inverse = matrix.inverse()
        self._transform = matrix
        self.inverse = inverse
        self.inverse_transpose = inverse.transpose()
        self.invalidate_bounds()

    def invalidate_bounds(self):
        if self.parent is not None:
            self.parent.invalidate_bounds()

    def intersect(self, ray: Ray) -> List[Intersection]:
        return self.local_intersect(ray.transform(self.inverse))

    def local_intersect(self, ray: Ray) -> List[Intersection]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def normal_at(self, world_point: Tuple, hit: Optional[Intersection] = None) -> Tuple:
        local_point = self.world_to_object(world_point)
        local_normal = self.local_normal_at(local_point, hit)
        perturber = self.material.normal_perturber
        if perturber is not None:
            local_normal = local_normal + perturber(local_point)
        return self.normal_to_world(local_normal)

    def local_normal_at(self, point: Tuple, hit: Optional[Intersection] = None) -> Tuple:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def local_bounds(self) -> AABB:
        raise NotImplementedError("local_bounds() must be implemented by subclasses.")

    def parent_space_bounds(self) -> AABB:
        return self.local_bounds().transform(self.transform)

    def world_to_object(self, world_point: Tuple) -> Tuple:
        if self.parent is not None:
            world_point = self.parent.world_to_object(world_point)
        return self.inverse * world_point

    def normal_to_world(self, normal: Tuple) -> Tuple:
        n = self.inverse_transpose * normal
        n = vector(n.x, n.y, n.z).normalize()
        if self.parent is not None:
            n = self.parent.normal_to_world(n)
        return n

    def includes(self, other: "Shape") -> bool:
        return other is self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self.transform!r})"
