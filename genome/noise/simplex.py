"""2D simplex noise.

Continuous gradient noise on a skewed triangular lattice. Each field is
fully determined by its seed: the permutation table is a seeded shuffle, and
sampling never touches any mutable state, so one field can be read from many
threads at once.
"""

from __future__ import annotations

import math
import random
from typing import List, Protocol

# Skewing factors for 2D
_F2 = 0.5 * (math.sqrt(3.0) - 1.0)
_G2 = (3.0 - math.sqrt(3.0)) / 6.0

# Scales the summed corner contributions to roughly [-1, 1]
_OUTPUT_SCALE = 70.0

_GRADIENTS = (
    (1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0),
    (1.0, 0.0), (-1.0, 0.0), (1.0, 0.0), (-1.0, 0.0),
    (0.0, 1.0), (0.0, -1.0), (0.0, 1.0), (0.0, -1.0),
)


class Noise(Protocol):
    """Anything that can be sampled as a 2D noise field."""

    def noise(self, x: float, y: float) -> float:
        ...


class SimplexNoise:
    """Seeded 2D simplex noise field with output in about ``[-1, 1]``."""

    def __init__(self, seed: int):
        self.seed = seed
        table = list(range(256))
        # Unsigned 32-bit view so that seeds n and -n give different fields
        random.Random(seed & 0xFFFFFFFF).shuffle(table)
        self._perm: List[int] = table + table
        self._perm_mod12: List[int] = [p % 12 for p in self._perm]

    def _corner(self, gradient_index: int, x: float, y: float) -> float:
        t = 0.5 - x * x - y * y
        if t < 0.0:
            return 0.0
        gx, gy = _GRADIENTS[gradient_index]
        t *= t
        return t * t * (gx * x + gy * y)

    def noise(self, x: float, y: float) -> float:
        """Sample the field at ``(x, y)``."""
        s = (x + y) * _F2
        i = math.floor(x + s)
        j = math.floor(y + s)
        t = (i + j) * _G2
        x0 = x - (i - t)
        y0 = y - (j - t)

        # Which of the two triangles of the skewed cell we are in
        if x0 > y0:
            i1, j1 = 1, 0
        else:
            i1, j1 = 0, 1

        x1 = x0 - i1 + _G2
        y1 = y0 - j1 + _G2
        x2 = x0 - 1.0 + 2.0 * _G2
        y2 = y0 - 1.0 + 2.0 * _G2

        ii = i & 255
        jj = j & 255
        perm = self._perm
        gi0 = self._perm_mod12[ii + perm[jj]]
        gi1 = self._perm_mod12[ii + i1 + perm[jj + j1]]
        gi2 = self._perm_mod12[ii + 1 + perm[jj + 1]]

        total = (
            self._corner(gi0, x0, y0)
            + self._corner(gi1, x1, y1)
            + self._corner(gi2, x2, y2)
        )
        return _OUTPUT_SCALE * total

    def __repr__(self) -> str:
        return f"SimplexNoise(seed={self.seed})"
