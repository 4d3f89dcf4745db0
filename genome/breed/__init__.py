"""Breeding: compatibility, crossover, mutation, and spatial biodiversity.

Design Philosophy:
- Algorithms never interpret gene symbols; meaning lives in the mutator
- Every crossover uses its own RNG; noise fields are pure and shared
- Compatibility checks return False, they never raise
"""

from genome.breed.algorithm import BreedingAlgorithm, validate_genes
from genome.breed.biodiversity import BiodiversityGenerator
from genome.breed.continuous import ContinuousBreedingAlgorithm
from genome.breed.discrete import (
    DiscreteBreedingAlgorithm,
    MonocultureBreedingAlgorithm,
    similarity,
)
from genome.breed.mutator import (
    GeneMutator,
    PositionalVocabularyGeneMutator,
    StepGeneMutator,
    VocabularyGeneMutator,
)

__all__ = [
    # Algorithms
    "BreedingAlgorithm",
    "ContinuousBreedingAlgorithm",
    "DiscreteBreedingAlgorithm",
    "MonocultureBreedingAlgorithm",
    "validate_genes",
    "similarity",
    # Mutators
    "GeneMutator",
    "VocabularyGeneMutator",
    "PositionalVocabularyGeneMutator",
    "StepGeneMutator",
    # Spatial generation
    "BiodiversityGenerator",
]
