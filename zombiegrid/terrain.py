"""Seeded Perlin noise and terrain generation for the simulation grid."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

ASCII_GRADIENT = " .`,:;-~=+*#%@"

Terrain = list[list[list[float]]]


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _gradient(hashed: int, dx: float, dy: float) -> float:
    selector = hashed & 3
    if selector == 0:
        return dx + dy
    if selector == 1:
        return -dx + dy
    if selector == 2:
        return dx - dy
    return -dx - dy


class Perlin:
    """Two-dimensional gradient noise with a seeded permutation table."""

    def __init__(self, seed: int) -> None:
        self.seed = int(seed) & 0xFFFF_FFFF
        table = list(range(256))
        random.Random(self.seed).shuffle(table)
        self._perm = tuple(table + table)

    def _hash(self, ix: int, iy: int) -> int:
        return self._perm[self._perm[ix & 255] + (iy & 255)]

    def get(self, point: Sequence[float]) -> float:
        """Return the noise value at ``point``, a pair of coordinates, in [-1, 1]."""
        if len(point) != 2:
            raise ValueError("Perlin.get expects a point with exactly two coordinates")
        x, y = float(point[0]), float(point[1])
        x0, y0 = math.floor(x), math.floor(y)
        dx, dy = x - x0, y - y0
        u, v = _fade(dx), _fade(dy)

        n00 = _gradient(self._hash(x0, y0), dx, dy)
        n10 = _gradient(self._hash(x0 + 1, y0), dx - 1.0, dy)
        n01 = _gradient(self._hash(x0, y0 + 1), dx, dy - 1.0)
        n11 = _gradient(self._hash(x0 + 1, y0 + 1), dx - 1.0, dy - 1.0)

        value = _lerp(v, _lerp(u, n00, n10), _lerp(u, n01, n11))
        return max(-1.0, min(1.0, value))


class TerrainGenerator:
    """Produces altitude and temperature maps from two noise sources."""

    def __init__(self, seed: int) -> None:
        seed = int(seed)
        self.altitude_perlin = Perlin(seed & 0xFFFF_FFFF)
        self.temperature_perlin = Perlin((seed >> 32) & 0xFFFF_FFFF)

    def generate(
        self, width: int, height: int, num_levels: int, base_level: float
    ) -> Terrain:
        """Return ``height`` rows of ``width`` cells, each ``[altitude, temperature]``."""
        terrain: Terrain = []
        for y in range(height):
            row = []
            for x in range(width):
                altitude = 0.0
                for level in range(num_levels):
                    step = base_level / (1 << level)
                    altitude += self.altitude_perlin.get((x / step, y / step)) / num_levels
                temperature = self.temperature_perlin.get((x / 20.0, y / 20.0))
                row.append([altitude, temperature])
            terrain.append(row)
        return terrain


def render_map(terrain: Terrain, index: int) -> str:
    """Render one layer of ``terrain`` as ASCII art, one line per row."""
    last = len(ASCII_GRADIENT) - 1
    lines = []
    for row in terrain:
        chars = []
        for cell in row:
            if 0 <= index < len(cell):
                normalized = min(1.0, max(0.0, (cell[index] + 1.0) / 2.0))
                chars.append(ASCII_GRADIENT[math.floor(normalized * last + 0.5)])
            else:
                chars.append("?")
        lines.append("".join(chars) + "\n")
    return "".join(lines)