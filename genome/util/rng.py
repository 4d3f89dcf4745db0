"""RNG utilities for deterministic genome generation.

This module provides the pseudo-random sequence used by the biodiversity
generator and the breeding algorithms, plus stable seed derivation helpers.
The builtin ``hash()`` is salted per process, so world seeds given as text
are hashed with a fixed polynomial hash instead.
"""

from __future__ import annotations

import random
from typing import Optional, Union

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This error indicates a bug in the caller - code that injects an RNG
    must inject a real one rather than relying on a silent fallback.
    """
    pass


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def string_hash(text: str) -> int:
    """Stable signed 32-bit hash of a string.

    Polynomial hash over UTF-16 code units (``h = 31 * h + unit``), which
    yields the same value on every run and platform.

    Args:
        text: String to hash

    Returns:
        Signed 32-bit hash value
    """
    encoded = text.encode("utf-16-le")
    h = 0
    for i in range(0, len(encoded), 2):
        unit = encoded[i] | (encoded[i + 1] << 8)
        h = (31 * h + unit) & _INT32_MASK
    return _to_int32(h)


def seed_from_world(world_seed: Union[str, int], diversity_seed: int) -> int:
    """Combine a world seed and a diversity seed into one 32-bit seed.

    Integer world seeds are used as-is, text seeds go through
    :func:`string_hash`. The sum wraps to signed 32-bit.

    Example:
        seed = seed_from_world("my world", 7)
        rng = FastRandom(seed)
    """
    if isinstance(world_seed, bool) or not isinstance(world_seed, (str, int)):
        raise TypeError(f"world_seed must be str or int, got {type(world_seed).__name__}")
    base = string_hash(world_seed) if isinstance(world_seed, str) else world_seed
    return _to_int32(base + int(diversity_seed))


class FastRandom:
    """Pseudo-random sequence with a small, explicit API.

    Wraps ``random.Random`` so that every consumer gets its own instance.
    Instances are not meant to be shared across threads.
    """

    def __init__(self, seed: Optional[int] = None):
        # random.Random seeds an int by its absolute value; n and -n must differ
        self._random = random.Random(None if seed is None else seed & _INT32_MASK)

    def next_int(self, bound: Optional[int] = None) -> int:
        """Next signed 32-bit int, or an int in ``[0, bound)`` when bound is given."""
        if bound is None:
            return _to_int32(self._random.getrandbits(32))
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self._random.randrange(bound)

    def next_float(self) -> float:
        """Next float in ``[0, 1)``."""
        return self._random.random()

    def next_bool(self) -> bool:
        return self._random.random() < 0.5


def require_rng_param(rng: Optional[FastRandom], context: str) -> FastRandom:
    """Validate that an RNG was provided, failing loudly if not.

    Use this where an RNG is injected (e.g. by an ``rng_factory``) instead of
    silently creating an unseeded fallback.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None
    """
    if rng is None:
        raise MissingRNGError(
            f"RNG required: {context}. The rng_factory returned None."
        )
    return rng
