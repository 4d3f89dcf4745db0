"""Genome definition: the genetic identity of one organism type."""

from __future__ import annotations

from genome.breed.algorithm import BreedingAlgorithm
from genome.genome_map import GenomeMap


class GenomeDefinition:
    """Common properties of an organism type.

    Bundles the default breeding algorithm with the genome map. Both are
    read-only once the definition exists.
    """

    __slots__ = ("_default_breeding_algorithm", "_genome_map")

    def __init__(self, default_breeding_algorithm: BreedingAlgorithm, genome_map: GenomeMap):
        self._default_breeding_algorithm = default_breeding_algorithm
        self._genome_map = genome_map

    @property
    def default_breeding_algorithm(self) -> BreedingAlgorithm:
        """The breeding algorithm used by this organism type."""
        return self._default_breeding_algorithm

    @property
    def genome_map(self) -> GenomeMap:
        """The genome map of this organism type."""
        return self._genome_map

    def __repr__(self) -> str:
        return (
            f"GenomeDefinition(default_breeding_algorithm={self._default_breeding_algorithm!r}, "
            f"properties={self._genome_map.property_names})"
        )
