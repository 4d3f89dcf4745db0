"""Breeding algorithm capability shared by all variants.

A breeding algorithm answers two questions about a pair of genomes: can they
breed (``can_cross``), and what does their offspring look like
(``produce_cross``). Compatibility checks never raise; crossing a pair that
fails validation is a programming error and raises
:class:`~genome.exceptions.IncompatibleGenomesError`.

Every crossover draws from its own RNG built by ``rng_factory``, so a single
algorithm instance can be shared by every organism of a species.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from genome.breed.mutator import GeneMutator
from genome.exceptions import ConfigurationError, IncompatibleGenomesError
from genome.util.rng import FastRandom, require_rng_param

logger = logging.getLogger(__name__)

RngFactory = Callable[[], FastRandom]


def validate_genes(genes1: Optional[str], genes2: Optional[str]) -> bool:
    """Check that both genomes are present and of equal length.

    Logs an error and returns False otherwise.
    """
    if genes1 is None or genes2 is None or len(genes1) != len(genes2):
        logger.error("Genomes not defined or of incorrect length")
        return False
    return True


def validate_mutation_chance(mutation_chance: float, context: str) -> float:
    chance = float(mutation_chance)
    if not 0.0 <= chance <= 1.0:
        raise ConfigurationError(f"{context}: mutation_chance must be in [0, 1], got {mutation_chance}")
    return chance


class BreedingAlgorithm(ABC):
    """Base class for breeding algorithms.

    Subclasses may add compatibility rules to ``can_cross`` but must keep
    the shared length validation.
    """

    def __init__(
        self,
        mutation_chance: float,
        gene_mutator: GeneMutator,
        rng_factory: Optional[RngFactory] = None,
    ):
        if gene_mutator is None:
            raise ConfigurationError(f"{type(self).__name__}: gene_mutator is required")
        self._mutation_chance = validate_mutation_chance(mutation_chance, type(self).__name__)
        self._gene_mutator = gene_mutator
        self._rng_factory: RngFactory = rng_factory or FastRandom

    @property
    def mutation_chance(self) -> float:
        return self._mutation_chance

    @property
    def gene_mutator(self) -> GeneMutator:
        return self._gene_mutator

    def _new_rng(self) -> FastRandom:
        return require_rng_param(self._rng_factory(), f"{type(self).__name__}.produce_cross")

    def _require_crossable(self, genes1: Optional[str], genes2: Optional[str]) -> None:
        if not self.can_cross(genes1, genes2):
            raise IncompatibleGenomesError(
                f"{type(self).__name__} cannot cross {genes1!r} with {genes2!r}"
            )

    @abstractmethod
    def can_cross(self, genes1: Optional[str], genes2: Optional[str]) -> bool:
        """Check whether two organisms with the given genes can breed.

        Args:
            genes1: The genes of the first organism
            genes2: The genes of the second organism

        Returns:
            Whether the two organisms can breed
        """

    @abstractmethod
    def produce_cross(self, genes1: str, genes2: str) -> str:
        """Produce the genes of an offspring of the two parents.

        Args:
            genes1: The genes of the first parent organism
            genes2: The genes of the second parent organism

        Returns:
            The genes of the offspring, same length as the parents

        Raises:
            IncompatibleGenomesError: If ``can_cross`` is False for the pair
        """

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(mutation_chance={self._mutation_chance}, "
            f"gene_mutator={self._gene_mutator!r})"
        )
