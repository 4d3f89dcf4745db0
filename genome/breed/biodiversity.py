"""Spatial biodiversity: genomes that vary with the spawn location.

Organisms of one species spawned close to each other should look related,
while populations far apart should drift. The generator achieves this
without storing anything per organism: each of its ``diversity_magnitude``
slots owns a pair of noise fields, one choosing *which* gene to mutate and
one choosing *how* to mutate it, both sampled at the spawn location.

Slots are applied in order to the same working copy, so a later slot may
overwrite a gene already mutated by an earlier one. This layering is
intentional: it is what lets neighbouring slots interact.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Sequence, Tuple, Union

from genome.breed.mutator import GeneMutator
from genome.exceptions import ConfigurationError
from genome.noise import Noise, SimplexNoise, UniformNoiseAlpha, floor_to_int, noise_to_unit
from genome.util.rng import FastRandom, seed_from_world

logger = logging.getLogger(__name__)

# Mutators take intensity in [0, 1)
_MAX_INTENSITY = math.nextafter(1.0, 0.0)

Location = Union[Tuple[float, float], Sequence[float], Any]


def _location_xy(location: Location) -> Tuple[float, float]:
    """Accept an ``(x, y)`` pair or any object with ``x``/``y`` attributes."""
    if hasattr(location, "x") and hasattr(location, "y"):
        return float(location.x), float(location.y)
    x, y = location
    return float(x), float(y)


class BiodiversityGenerator:
    """Generates genes for organisms based on their spawn area.

    Immutable after construction; ``generate_genes`` can be called from
    many threads on one instance.
    """

    def __init__(
        self,
        world_seed: Union[str, int],
        diversity_seed: int,
        gene_mutator: GeneMutator,
        base_genome: str,
        diversity_magnitude: int,
        area_diversity: float,
    ):
        """Prepare the noise fields used by this generator.

        Args:
            world_seed: World seed
            diversity_seed: Unique value for each generator sharing a world seed,
                so that populations of different species do not correlate
            gene_mutator: Mutator used for this species-group
            base_genome: Base genome for this species-group
            diversity_magnitude: Number of mutation slots; the higher, the more
                diverse the organisms are
            area_diversity: How quickly genes change with spawn position; the
                higher, the more diverse organisms close to each other will be

        Raises:
            ConfigurationError: If the configuration cannot generate genomes
        """
        if not base_genome:
            raise ConfigurationError("base_genome must not be empty")
        if isinstance(diversity_magnitude, bool) or not isinstance(diversity_magnitude, int):
            raise ConfigurationError(
                f"diversity_magnitude must be an int, got {type(diversity_magnitude).__name__}"
            )
        if diversity_magnitude < 0:
            raise ConfigurationError(f"diversity_magnitude must be >= 0, got {diversity_magnitude}")
        if not math.isfinite(float(area_diversity)):
            raise ConfigurationError(f"area_diversity must be finite, got {area_diversity}")
        if gene_mutator is None:
            raise ConfigurationError("gene_mutator is required")

        self._base_genome = base_genome
        self._gene_mutator = gene_mutator
        self._area_diversity = float(area_diversity)
        self._uniform = UniformNoiseAlpha()

        random = FastRandom(seed_from_world(world_seed, diversity_seed))
        position_noises: List[Noise] = []
        input_noises: List[Noise] = []
        for _ in range(diversity_magnitude):
            # Position seed first, then intensity seed, for every slot
            position_noises.append(SimplexNoise(random.next_int()))
            input_noises.append(SimplexNoise(random.next_int()))
        self._position_noises: Tuple[Noise, ...] = tuple(position_noises)
        self._input_noises: Tuple[Noise, ...] = tuple(input_noises)

        logger.debug(
            "BiodiversityGenerator ready: length=%d slots=%d area_diversity=%s",
            len(base_genome),
            diversity_magnitude,
            self._area_diversity,
        )

    @property
    def base_genome(self) -> str:
        return self._base_genome

    @property
    def diversity_magnitude(self) -> int:
        return len(self._position_noises)

    @property
    def area_diversity(self) -> float:
        return self._area_diversity

    @property
    def gene_mutator(self) -> GeneMutator:
        return self._gene_mutator

    def _value_from_noise(self, noise: Noise, x: float, y: float) -> float:
        return self._uniform.apply(noise_to_unit(noise.noise(x, y)))

    def generate_genes(self, location: Location) -> str:
        """Generate the genes of an organism expected to inhabit ``location``.

        Args:
            location: World position, an ``(x, y)`` pair or an object with
                ``x`` and ``y``

        Returns:
            Genes of the same length as the base genome
        """
        x, y = _location_xy(location)
        sample_x = self._area_diversity * x
        sample_y = self._area_diversity * y

        result = list(self._base_genome)
        length = len(result)
        for position_noise, input_noise in zip(self._position_noises, self._input_noises):
            position = floor_to_int(length * self._value_from_noise(position_noise, sample_x, sample_y))
            # A noise value of exactly 1.0 would index one past the end
            position = max(0, min(length - 1, position))
            intensity = min(_MAX_INTENSITY, self._value_from_noise(input_noise, sample_x, sample_y))
            result[position] = self._gene_mutator.mutate_gene(intensity, position, result[position])
        return "".join(result)

    def __repr__(self) -> str:
        return (
            f"BiodiversityGenerator(base_genome={self._base_genome!r}, "
            f"diversity_magnitude={self.diversity_magnitude}, area_diversity={self._area_diversity})"
        )
