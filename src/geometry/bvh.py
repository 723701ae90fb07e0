# geometry/bvh.py
import logging
import math
from geometry.csg import CSG
from geometry.group import Group

logger = logging.getLogger(__name__)


def partition_children(group: Group):
    """
    Splits the group's bounds along the longest axis and removes the children
    that fit entirely in either half. Children straddling the cut stay put.
    Returns (left, right) lists.
    """
    box = group.local_bounds()
    left_box, right_box = box.split()
    # Infinite extents have no midpoint to cut at.
    cut = (left_box.maximum.x, left_box.maximum.y, left_box.maximum.z)
    if any(math.isnan(c) for c in cut):
        return [], []

    left, right, remaining = [], [], []
    for child in group.children:
        child_box = child.parent_space_bounds()
        if left_box.contains_box(child_box):
            left.append(child)
        elif right_box.contains_box(child_box):
            right.append(child)
        else:
            remaining.append(child)
    if not remaining and (not left or not right):
        # Everything on one side; splitting again would recurse forever.
        return [], []
    for child in left + right:
        group.remove_child(child)
    return left, right


def make_subgroup(group: Group, children) -> Group:
    subgroup = Group(children)
    group.add_child(subgroup)
    return subgroup


def divide(shape, threshold: int):
    """
    Recursively subdivides groups with at least `threshold` children into a
    hierarchy of smaller groups so that bounding boxes cull more rays.
    Intersection results are unchanged; only the tree shape is.
    """
    if isinstance(shape, Group):
        if threshold <= len(shape.children):
            left, right = partition_children(shape)
            if left:
                make_subgroup(shape, left)
            if right:
                make_subgroup(shape, right)
            if left or right:
                logger.debug("Moved %d children left and %d right, %d stay in place",
                             len(left), len(right), len(shape.children) - bool(left) - bool(right))
        for child in shape.children:
            divide(child, threshold)
    elif isinstance(shape, CSG):
        divide(shape.left, threshold)
        divide(shape.right, threshold)
