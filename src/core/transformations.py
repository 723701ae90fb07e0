# core/transformations.py
import math
from functools import reduce
from core.matrix import Matrix4, IDENTITY
from core.vector import Tuple


def translation(x: float, y: float, z: float) -> Matrix4:
    return Matrix4([[1, 0, 0, x],
                    [0, 1, 0, y],
                    [0, 0, 1, z],
                    [0, 0, 0, 1]])


def scaling(x: float, y: float, z: float) -> Matrix4:
    return Matrix4([[x, 0, 0, 0],
                    [0, y, 0, 0],
                    [0, 0, z, 0],
                    [0, 0, 0, 1]])


def rotation_x(radians: float) -> Matrix4:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix4([[1, 0, 0, 0],
                    [0, c, -s, 0],
                    [0, s, c, 0],
                    [0, 0, 0, 1]])


def rotation_y(radians: float) -> Matrix4:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix4([[c, 0, s, 0],
                    [0, 1, 0, 0],
                    [-s, 0, c, 0],
                    [0, 0, 0, 1]])


def rotation_z(radians: float) -> Matrix4:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix4([[c, -s, 0, 0],
                    [s, c, 0, 0],
                    [0, 0, 1, 0],
                    [0, 0, 0, 1]])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix4:
    """
    Each argument moves one component in proportion to another, e.g. xy moves
    x in proportion to y.
    """
    return Matrix4([[1, xy, xz, 0],
                    [yx, 1, yz, 0],
                    [zx, zy, 1, 0],
                    [0, 0, 0, 1]])


def chain(*transforms: Matrix4) -> Matrix4:
    """
    Composes transforms in the order they should be applied, so
    chain(rotate, scale, translate) == translate * scale * rotate.
    """
    return reduce(lambda acc, m: m * acc, transforms, IDENTITY)


def view_transform(from_point: Tuple, to: Tuple, up: Tuple) -> Matrix4:
    """
    Orients the world relative to an eye at from_point looking at `to`.
    """
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix4([[left.x, left.y, left.z, 0],
                           [true_up.x, true_up.y, true_up.z, 0],
                           [-forward.x, -forward.y, -forward.z, 0],
                           [0, 0, 0, 1]])
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)
