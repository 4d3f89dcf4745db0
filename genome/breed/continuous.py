"""Breeding algorithm for continuous traits.

Offspring values outside the range spanned by the parents come only from
mutation, never from numeric averaging, so the algorithm stays agnostic of
what a symbol means. Slightly higher mutation chances are recommended with
this algorithm.

Crossover runs in two phases:
1. Each parent's genome is copied into its own strand, with an independent
   mutation roll per position and per strand.
2. The offspring takes each position from strand A or strand B by a fresh
   coin flip (uniform crossover, no split point).
"""

from __future__ import annotations

from typing import List, Optional

from genome.breed.algorithm import BreedingAlgorithm, validate_genes
from genome.util.rng import FastRandom


class ContinuousBreedingAlgorithm(BreedingAlgorithm):
    """Any two well-formed genomes of equal length can cross."""

    def can_cross(self, genes1: Optional[str], genes2: Optional[str]) -> bool:
        return validate_genes(genes1, genes2)

    def _strand(self, genes: str, position: int, rng: FastRandom) -> str:
        if rng.next_float() < self._mutation_chance:
            return self._gene_mutator.mutate_gene(rng.next_float(), position, genes[position])
        return genes[position]

    def produce_cross(self, genes1: str, genes2: str) -> str:
        self._require_crossable(genes1, genes2)
        rng = self._new_rng()

        strand1: List[str] = []
        strand2: List[str] = []
        for i in range(len(genes1)):
            strand1.append(self._strand(genes1, i, rng))
            strand2.append(self._strand(genes2, i, rng))

        return "".join(
            strand1[j] if rng.next_bool() else strand2[j] for j in range(len(genes1))
        )
