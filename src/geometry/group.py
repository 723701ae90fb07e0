# geometry/group.py
from typing import List
from core.aabb import AABB
from geometry.intersection import Intersection
from geometry.shape import Shape


class Group(Shape):
    """
    A transformable collection of shapes, possibly other groups.

    The group's bounding box (in its own object space) is cached and dropped
    whenever a descendant is added or re-transformed. Rays that miss the box
    skip every child.
    """
    def __init__(self, children=None, **kwargs):
        self.children: List[Shape] = []
        self.use_bounds = True
        self._bounds = None
        super().__init__(**kwargs)
        self.material = None
        for child in children or ():
            self.add_child(child)

    def add_child(self, child: Shape) -> Shape:
        if child.parent is not None and child.parent is not self:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        self.invalidate_bounds()
        return child

    def remove_child(self, child: Shape):
        self.children = [c for c in self.children if c is not child]
        child.parent = None
        self.invalidate_bounds()

    def is_empty(self) -> bool:
        return not self.children

    def invalidate_bounds(self):
        self._bounds = None
        super().invalidate_bounds()

    def local_bounds(self) -> AABB:
        if self._bounds is None:
            box = AABB()
            for child in self.children:
                box = AABB.surrounding_box(box, child.parent_space_bounds())
            self._bounds = box
        return self._bounds

    def local_intersect(self, ray) -> List[Intersection]:
        if self.use_bounds and not self.local_bounds().hit(ray):
            return []
        xs = []
        for child in self.children:
            xs.extend(child.intersect(ray))
        xs.sort(key=lambda i: i.t)
        return xs

    def local_normal_at(self, p, hit=None):
        raise TypeError("Groups have no surface; normals come from their children")

    def includes(self, other: Shape) -> bool:
        return any(child.includes(other) for child in self.children)

    def __iter__(self):
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)
