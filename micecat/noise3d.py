"""Three-dimensional gradient noise built on the shared permutation table."""

from __future__ import annotations

import math

from micecat.noise import PERM, _lattice_index, fade, lerp


def grad3(hash_value: int, x: float, y: float, z: float) -> float:
    """Dot product of the offset with one of eight edge gradients."""
    selector = hash_value & 0b111
    if selector == 0:
        return x + y
    if selector == 1:
        return -x + y
    if selector == 2:
        return x - y
    if selector == 3:
        return -x - y
    if selector == 4:
        return x + z
    if selector == 5:
        return -x + z
    if selector == 6:
        return x - z
    return -x - z


def perlin3d(x: float, y: float, z: float) -> float:
    """Permutation-table 3D Perlin noise, remapped around 0.5."""
    xi = _lattice_index(x)
    yi = _lattice_index(y)
    zi = _lattice_index(z)

    xf = x - math.floor(x)
    yf = y - math.floor(y)
    zf = z - math.floor(z)

    u = fade(xf)
    v = fade(yf)
    w = fade(zf)

    a = PERM[xi]
    b = PERM[xi + 1]
    aa = PERM[a + yi]
    ab = PERM[a + yi + 1]
    ba = PERM[b + yi]
    bb = PERM[b + yi + 1]

    aaa = PERM[aa + zi]
    aba = PERM[ab + zi]
    aab = PERM[aa + zi + 1]
    abb = PERM[ab + zi + 1]
    baa = PERM[ba + zi]
    bba = PERM[bb + zi]
    bab = PERM[ba + zi + 1]
    bbb = PERM[bb + zi + 1]

    x1 = lerp(grad3(aaa, xf, yf, zf), grad3(baa, xf - 1.0, yf, zf), u)
    x2 = lerp(grad3(aba, xf, yf - 1.0, zf), grad3(bba, xf - 1.0, yf - 1.0, zf), u)
    y1 = lerp(x1, x2, v)

    x3 = lerp(grad3(aab, xf, yf, zf - 1.0), grad3(bab, xf - 1.0, yf, zf - 1.0), u)
    x4 = lerp(
        grad3(abb, xf, yf - 1.0, zf - 1.0),
        grad3(bbb, xf - 1.0, yf - 1.0, zf - 1.0),
        u,
    )
    y2 = lerp(x3, x4, v)

    return (lerp(y1, y2, w) + 1.0) / 2.0


def perlin3d_octaves(
    x: float,
    y: float,
    z: float,
    octaves: int,
    persistence: float,
    scale: float,
) -> float:
    """Fractal sum of :func:`perlin3d` octaves, normalised by total amplitude.

    With zero octaves the normalisation is 0/0 and the result is NaN.
    """
    total = 0.0
    frequency = 1.0
    amplitude = 1.0
    max_value = 0.0

    for _ in range(octaves):
        total += (
            perlin3d(x * frequency / scale, y * frequency / scale, z * frequency / scale)
            * amplitude
        )
        max_value += amplitude
        amplitude *= persistence
        frequency *= 2.0

    if max_value == 0.0:
        return math.nan
    return total / max_value