"""Breeding algorithms for discrete traits.

Discrete offspring only ever carry a parent's symbol at each position, apart
from at most one point mutation per crossover. Compatibility can be narrowed
with a minimum similarity: the number of positions where both parents carry
the same symbol.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from genome.breed.algorithm import BreedingAlgorithm, RngFactory, validate_genes
from genome.breed.mutator import GeneMutator
from genome.exceptions import ConfigurationError
from genome.util.rng import FastRandom

logger = logging.getLogger(__name__)


def similarity(genes1: str, genes2: str) -> int:
    """Count positions where the two genomes carry the same symbol."""
    return sum(1 for a, b in zip(genes1, genes2) if a == b)


class DiscreteBreedingAlgorithm(BreedingAlgorithm):
    """Picks each gene from one parent, then maybe mutates one position."""

    def __init__(
        self,
        minimum_similarity: int,
        mutation_chance: float,
        gene_mutator: GeneMutator,
        rng_factory: Optional[RngFactory] = None,
    ):
        super().__init__(mutation_chance, gene_mutator, rng_factory)
        if minimum_similarity < 0:
            raise ConfigurationError(
                f"minimum_similarity must be >= 0, got {minimum_similarity}"
            )
        self._minimum_similarity = int(minimum_similarity)

    @property
    def minimum_similarity(self) -> int:
        return self._minimum_similarity

    def can_cross(self, genes1: Optional[str], genes2: Optional[str]) -> bool:
        if not validate_genes(genes1, genes2):
            return False
        shared = similarity(genes1, genes2)
        if shared < self._minimum_similarity:
            logger.debug(
                "Genomes too different to breed: %d shared genes, need %d",
                shared,
                self._minimum_similarity,
            )
            return False
        return True

    def _maybe_mutate(self, genes: List[str], rng: FastRandom) -> None:
        if genes and rng.next_float() < self._mutation_chance:
            index = rng.next_int(len(genes))
            genes[index] = self._gene_mutator.mutate_gene(rng.next_float(), index, genes[index])

    def produce_cross(self, genes1: str, genes2: str) -> str:
        self._require_crossable(genes1, genes2)
        rng = self._new_rng()

        result = [a if rng.next_bool() else b for a, b in zip(genes1, genes2)]
        self._maybe_mutate(result, rng)
        return "".join(result)

    def __repr__(self) -> str:
        return (
            f"DiscreteBreedingAlgorithm(minimum_similarity={self._minimum_similarity}, "
            f"mutation_chance={self._mutation_chance}, gene_mutator={self._gene_mutator!r})"
        )


class MonocultureBreedingAlgorithm(DiscreteBreedingAlgorithm):
    """Only identical genomes can breed; offspring may carry one mutation."""

    def __init__(
        self,
        mutation_chance: float,
        gene_mutator: GeneMutator,
        rng_factory: Optional[RngFactory] = None,
    ):
        super().__init__(0, mutation_chance, gene_mutator, rng_factory)

    def can_cross(self, genes1: Optional[str], genes2: Optional[str]) -> bool:
        return validate_genes(genes1, genes2) and genes1 == genes2

    def __repr__(self) -> str:
        return (
            f"MonocultureBreedingAlgorithm(mutation_chance={self._mutation_chance}, "
            f"gene_mutator={self._gene_mutator!r})"
        )
