"""Core utilities for genome generation."""

from genome.util.rng import (
    FastRandom,
    MissingRNGError,
    require_rng_param,
    seed_from_world,
    string_hash,
)

__all__ = [
    "FastRandom",
    "MissingRNGError",
    "require_rng_param",
    "seed_from_world",
    "string_hash",
]
