# materials/noise.py
import math
import numpy as np
from numba import njit


def make_permutation(seed: int = 0) -> np.ndarray:
    """
    Doubled permutation table for Perlin noise. The same seed always yields
    the same table, so noise never depends on global random state.
    """
    p = np.random.default_rng(seed).permutation(256)
    return np.concatenate([p, p]).astype(np.int64)


@njit
def _fade(t):
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@njit
def _lerp(t, a, b):
    return a + t * (b - a)


@njit
def _grad(h, x, y, z):
    h = h & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h == 12 or h == 14:
        v = x
    else:
        v = z
    return (u if (h & 1) == 0 else -u) + (v if (h & 2) == 0 else -v)


@njit
def perlin(perm, x, y, z):
    """Improved Perlin noise in roughly [-1, 1]; zero at lattice points."""
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    xi = int(fx) & 255
    yi = int(fy) & 255
    zi = int(fz) & 255
    x -= fx
    y -= fy
    z -= fz
    u = _fade(x)
    v = _fade(y)
    w = _fade(z)

    a = perm[xi] + yi
    aa = perm[a] + zi
    ab = perm[a + 1] + zi
    b = perm[xi + 1] + yi
    ba = perm[b] + zi
    bb = perm[b + 1] + zi

    return _lerp(w,
                 _lerp(v,
                       _lerp(u, _grad(perm[aa], x, y, z), _grad(perm[ba], x - 1, y, z)),
                       _lerp(u, _grad(perm[ab], x, y - 1, z), _grad(perm[bb], x - 1, y - 1, z))),
                 _lerp(v,
                       _lerp(u, _grad(perm[aa + 1], x, y, z - 1), _grad(perm[ba + 1], x - 1, y, z - 1)),
                       _lerp(u, _grad(perm[ab + 1], x, y - 1, z - 1),
                             _grad(perm[bb + 1], x - 1, y - 1, z - 1))))


@njit
def turbulence(perm, x, y, z, octaves):
    """Sum of `octaves` noise layers, each at double frequency and half amplitude."""
    total = 0.0
    freq = 1.0
    amp = 1.0
    for _ in range(octaves):
        total += perlin(perm, x * freq, y * freq, z * freq) * amp
        freq *= 2.0
        amp *= 0.5
    return total
