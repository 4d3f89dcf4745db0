"""Deterministic noise fields and the alpha functions that remap them."""

from genome.noise.alpha import (
    AlphaFunction,
    IdentityAlphaFunction,
    UniformNoiseAlpha,
    clamp,
    floor_to_int,
    noise_to_unit,
)
from genome.noise.simplex import Noise, SimplexNoise

__all__ = [
    "AlphaFunction",
    "IdentityAlphaFunction",
    "Noise",
    "SimplexNoise",
    "UniformNoiseAlpha",
    "clamp",
    "floor_to_int",
    "noise_to_unit",
]
