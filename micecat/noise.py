"""Two-dimensional gradient noise used for terrain height maps."""

from __future__ import annotations

import math

_BASE_PERMUTATION: tuple[int, ...] = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)

PERM: tuple[int, ...] = _BASE_PERMUTATION * 2
"""The 256-entry permutation table repeated twice (512 entries)."""

_USIZE_MAX = 2**64 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_GRADIENTS_2D = ((1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0))


def _lattice_index(value: float) -> int:
    """Floor ``value`` into an unsigned index, saturating, and keep its low byte."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return _USIZE_MAX & 255
    return min(math.floor(value), _USIZE_MAX) & 255


def _floor_i32(value: float) -> int:
    """Floor ``value`` into a saturating 32-bit signed integer."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _I32_MAX if value > 0 else _I32_MIN
    return max(_I32_MIN, min(_I32_MAX, math.floor(value)))


def fade(t: float) -> float:
    """Quintic smoothstep curve 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between ``a`` and ``b``."""
    return a + t * (b - a)


def grad(hash_value: int, x: float, y: float) -> float:
    """Dot product of the offset with one of four diagonal gradients."""
    selector = hash_value & 0b11
    if selector == 0:
        return x + y
    if selector == 1:
        return -x + y
    if selector == 2:
        return x - y
    return -x - y


def perlin(x: float, y: float) -> float:
    """Permutation-table Perlin noise, remapped to roughly [0, 1]."""
    xi = _lattice_index(x)
    yi = _lattice_index(y)

    xf = x - math.floor(x)
    yf = y - math.floor(y)

    u = fade(xf)
    v = fade(yf)

    aa = PERM[PERM[xi] + yi]
    ab = PERM[PERM[xi] + yi + 1]
    ba = PERM[PERM[xi + 1] + yi]
    bb = PERM[PERM[xi + 1] + yi + 1]

    x1 = lerp(grad(aa, xf, yf), grad(ba, xf - 1.0, yf), u)
    x2 = lerp(grad(ab, xf, yf - 1.0), grad(bb, xf - 1.0, yf - 1.0), u)

    return (lerp(x1, x2, v) + 1.0) / 2.0


def _hashed_gradient(ix: int, iy: int) -> tuple[float, float]:
    hashed = (ix * 374761393 + iy * 668265263) & 0xFFFFFFFF
    return _GRADIENTS_2D[hashed % 4]


def _wrap_i32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _I32_MAX else value


def perlin2d(x: float, y: float) -> float:
    """Hash-based gradient noise in roughly [-1, 1]; zero at lattice points."""
    x0 = _floor_i32(x)
    y0 = _floor_i32(y)
    xf = x - x0
    yf = y - y0
    x1 = _wrap_i32(x0 + 1)
    y1 = _wrap_i32(y0 + 1)

    g00x, g00y = _hashed_gradient(x0, y0)
    g10x, g10y = _hashed_gradient(x1, y0)
    g01x, g01y = _hashed_gradient(x0, y1)
    g11x, g11y = _hashed_gradient(x1, y1)

    dot00 = g00x * xf + g00y * yf
    dot10 = g10x * (xf - 1.0) + g10y * yf
    dot01 = g01x * xf + g01y * (yf - 1.0)
    dot11 = g11x * (xf - 1.0) + g11y * (yf - 1.0)

    u = fade(xf)
    v = fade(yf)

    nx0 = lerp(dot00, dot10, u)
    nx1 = lerp(dot01, dot11, u)
    return lerp(nx0, nx1, v)


def perlin_octaves(
    x: float, y: float, octaves: int, persistence: float, scale: float
) -> float:
    """Fractal sum of :func:`perlin` octaves, normalised by total amplitude.

    With zero octaves the normalisation is 0/0 and the result is NaN.
    """
    total = 0.0
    frequency = 1.0
    amplitude = 1.0
    max_value = 0.0

    for _ in range(octaves):
        total += perlin(x * frequency / scale, y * frequency / scale) * amplitude
        max_value += amplitude
        amplitude *= persistence
        frequency *= 2.0

    if max_value == 0.0:
        return math.nan
    return total / max_value