"""Heritable traits for organisms in a procedurally generated world.

This package derives an organism's genome from its spawn location and
combines the genomes of two organisms into offspring:

- Biodiversity: deterministic, noise-driven genomes that vary across the world
- Breeding: compatibility checks and crossover with pluggable mutation
- Definitions: a species' default breeding algorithm and genome map
"""

from genome.breed import (
    BiodiversityGenerator,
    BreedingAlgorithm,
    ContinuousBreedingAlgorithm,
    DiscreteBreedingAlgorithm,
    GeneMutator,
    MonocultureBreedingAlgorithm,
    PositionalVocabularyGeneMutator,
    StepGeneMutator,
    VocabularyGeneMutator,
)
from genome.definition import GenomeDefinition
from genome.exceptions import (
    ConfigurationError,
    GenomeError,
    GenomeMapError,
    IncompatibleGenomesError,
)
from genome.genome_map import GenomeMap

__version__ = "0.1.0"

__all__ = [
    # Breeding
    "BreedingAlgorithm",
    "ContinuousBreedingAlgorithm",
    "DiscreteBreedingAlgorithm",
    "MonocultureBreedingAlgorithm",
    # Mutators
    "GeneMutator",
    "VocabularyGeneMutator",
    "PositionalVocabularyGeneMutator",
    "StepGeneMutator",
    # Spatial generation
    "BiodiversityGenerator",
    # Definitions
    "GenomeDefinition",
    "GenomeMap",
    # Errors
    "GenomeError",
    "ConfigurationError",
    "IncompatibleGenomesError",
    "GenomeMapError",
]
