"""Alpha functions remapping noise samples in ``[0, 1]``.

Simplex noise is bell-shaped: remapped samples cluster around 0.5 and rarely
reach the ends of the range. ``UniformNoiseAlpha`` flattens that distribution
with an empirical CDF so that every gene position is about equally likely to
be picked by the biodiversity generator.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from functools import lru_cache
from typing import Protocol, Tuple

from genome.noise.simplex import SimplexNoise

# Calibration sampling for the uniform correction table
_CALIBRATION_SEED = 0x5EED
_CALIBRATION_GRID = 96
_CALIBRATION_STEP = 0.173


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def floor_to_int(value: float) -> int:
    return int(value // 1)


def noise_to_unit(raw: float) -> float:
    """Remap a raw ``[-1, 1]`` noise sample to ``[0, 1]``."""
    return clamp((raw + 1.0) / 2.0)


class AlphaFunction(Protocol):
    def apply(self, value: float) -> float:
        ...


class IdentityAlphaFunction:
    """Returns its input unchanged."""

    _instance: "IdentityAlphaFunction | None" = None

    @classmethod
    def singleton(cls) -> "IdentityAlphaFunction":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def apply(self, value: float) -> float:
        return value


@lru_cache(maxsize=1)
def _calibration_table() -> Tuple[float, ...]:
    """Sorted remapped simplex samples used as the empirical CDF."""
    field = SimplexNoise(_CALIBRATION_SEED)
    samples = [
        noise_to_unit(field.noise(gx * _CALIBRATION_STEP + 0.5, gy * _CALIBRATION_STEP + 0.25))
        for gx in range(_CALIBRATION_GRID)
        for gy in range(_CALIBRATION_GRID)
    ]
    samples.sort()
    return tuple(samples)


class UniformNoiseAlpha:
    """Corrects remapped simplex noise toward a uniform distribution.

    The corrected value is the fraction of calibration samples at or below
    the input, averaged over ties, then passed through ``inner``.
    """

    def __init__(self, inner: AlphaFunction | None = None):
        self.inner = inner if inner is not None else IdentityAlphaFunction.singleton()
        self._table = _calibration_table()

    def apply(self, value: float) -> float:
        table = self._table
        value = clamp(value)
        lower = bisect_left(table, value)
        upper = bisect_right(table, value)
        corrected = (lower + upper) / (2.0 * len(table))
        return self.inner.apply(clamp(corrected))
