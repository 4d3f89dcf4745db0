"""Species configuration models.

A species is described by its base genome, the mutator that knows what its
symbols mean, its default breeding algorithm, and how its wild population
varies across the world. The models validate on construction so a bad
species document fails at load time, never at spawn time.

Example document::

    {
        "name": "meadow_flower",
        "base_genome": "CCMM",
        "mutator": {"kind": "vocabulary", "vocabulary": "ABCDEFGHIJKLMNOP"},
        "breeding": {"algorithm": "continuous", "mutation_chance": 0.1},
        "biodiversity": {"diversity_seed": 3, "diversity_magnitude": 2,
                         "area_diversity": 0.02},
        "properties": [{"name": "petal_size", "positions": [0],
                        "converter": "normalized"}]
    }
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, List, Literal, Optional, Union

import orjson
from pydantic import BaseModel, ConfigDict, Field, model_validator

from genome.breed.algorithm import BreedingAlgorithm, RngFactory
from genome.breed.biodiversity import BiodiversityGenerator
from genome.breed.continuous import ContinuousBreedingAlgorithm
from genome.breed.discrete import DiscreteBreedingAlgorithm, MonocultureBreedingAlgorithm
from genome.breed.mutator import (
    GeneMutator,
    PositionalVocabularyGeneMutator,
    StepGeneMutator,
    VocabularyGeneMutator,
)
from genome.config.defaults import (
    DEFAULT_AREA_DIVERSITY,
    DEFAULT_DIVERSITY_MAGNITUDE,
    DEFAULT_DIVERSITY_SEED,
    DEFAULT_MAX_STEP,
    DEFAULT_MINIMUM_SIMILARITY,
    DEFAULT_MUTATION_CHANCE,
)
from genome.definition import GenomeDefinition
from genome.exceptions import ConfigurationError
from genome.genome_map import GenomeMap

logger = logging.getLogger(__name__)


class MutatorSettings(BaseModel):
    """Which gene mutator the species uses."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["vocabulary", "positional", "step"] = "vocabulary"
    vocabulary: str = ""
    vocabularies: List[str] = Field(default_factory=list)
    max_step: int = Field(DEFAULT_MAX_STEP, ge=1)

    @model_validator(mode="after")
    def _check_vocabulary(self) -> "MutatorSettings":
        if self.kind == "positional":
            if not self.vocabularies or not all(self.vocabularies):
                raise ValueError("positional mutator needs a non-empty vocabulary per position")
        elif not self.vocabulary:
            raise ValueError(f"{self.kind} mutator needs a non-empty vocabulary")
        return self

    def build(self) -> GeneMutator:
        if self.kind == "positional":
            return PositionalVocabularyGeneMutator(self.vocabularies)
        if self.kind == "step":
            return StepGeneMutator(self.vocabulary, self.max_step)
        return VocabularyGeneMutator(self.vocabulary)

    def symbol_order(self, position: int) -> str:
        """Ordered symbols available at ``position`` (used by index converters)."""
        if self.kind == "positional":
            if position < len(self.vocabularies):
                return self.vocabularies[position]
            return ""
        return self.vocabulary


class BreedingSettings(BaseModel):
    """Default breeding algorithm of the species."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    algorithm: Literal["continuous", "discrete", "monoculture"] = "continuous"
    mutation_chance: float = Field(DEFAULT_MUTATION_CHANCE, ge=0.0, le=1.0)
    minimum_similarity: int = Field(DEFAULT_MINIMUM_SIMILARITY, ge=0)


class BiodiversitySettings(BaseModel):
    """How the wild population varies with spawn location."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    diversity_seed: int = DEFAULT_DIVERSITY_SEED
    diversity_magnitude: int = Field(DEFAULT_DIVERSITY_MAGNITUDE, ge=0)
    area_diversity: float = DEFAULT_AREA_DIVERSITY


class PropertySettings(BaseModel):
    """A genome map property.

    Converters:
    - symbols: the raw symbols as a string
    - index: index of the first symbol in the mutator's ordered vocabulary
    - normalized: that index scaled to [0, 1]
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    positions: List[int] = Field(min_length=1)
    converter: Literal["symbols", "index", "normalized"] = "symbols"

    @model_validator(mode="after")
    def _check_positions(self) -> "PropertySettings":
        if any(p < 0 for p in self.positions):
            raise ValueError(f"property '{self.name}' has a negative position")
        return self


class SpeciesConfig(BaseModel):
    """Complete genetic description of one species."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    base_genome: str = Field(min_length=1)
    mutator: MutatorSettings
    breeding: BreedingSettings = Field(default_factory=BreedingSettings)
    biodiversity: BiodiversitySettings = Field(default_factory=BiodiversitySettings)
    properties: List[PropertySettings] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_layout(self) -> "SpeciesConfig":
        length = len(self.base_genome)
        for prop in self.properties:
            if max(prop.positions) >= length:
                raise ValueError(
                    f"property '{prop.name}' reads past the end of a genome of length {length}"
                )
        if self.breeding.algorithm == "discrete" and self.breeding.minimum_similarity > length:
            raise ValueError(
                f"minimum_similarity {self.breeding.minimum_similarity} exceeds genome length "
                f"{length}; no two organisms could ever breed"
            )
        if self.mutator.kind == "positional" and len(self.mutator.vocabularies) != length:
            raise ValueError(
                f"positional mutator has {len(self.mutator.vocabularies)} vocabularies "
                f"for a genome of length {length}"
            )
        return self

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "SpeciesConfig":
        try:
            payload = orjson.loads(data)
        except orjson.JSONDecodeError as exc:
            raise ConfigurationError(f"Species config is not valid JSON: {exc}") from exc
        return cls.model_validate(payload)

    def to_json(self) -> bytes:
        return orjson.dumps(self.model_dump(), option=orjson.OPT_INDENT_2)

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def build_mutator(self) -> GeneMutator:
        return self.mutator.build()

    def build_breeding_algorithm(
        self,
        gene_mutator: Optional[GeneMutator] = None,
        rng_factory: Optional[RngFactory] = None,
    ) -> BreedingAlgorithm:
        mutator = gene_mutator or self.build_mutator()
        settings = self.breeding
        if settings.algorithm == "discrete":
            return DiscreteBreedingAlgorithm(
                settings.minimum_similarity, settings.mutation_chance, mutator, rng_factory
            )
        if settings.algorithm == "monoculture":
            return MonocultureBreedingAlgorithm(settings.mutation_chance, mutator, rng_factory)
        return ContinuousBreedingAlgorithm(settings.mutation_chance, mutator, rng_factory)

    def _converter(self, prop: PropertySettings) -> Callable[[str], Any]:
        if prop.converter == "symbols":
            return str
        order = self.mutator.symbol_order(prop.positions[0])
        if prop.converter == "index":
            return lambda symbols: order.find(symbols[0])
        span = max(len(order) - 1, 1)
        return lambda symbols: max(order.find(symbols[0]), 0) / span

    def build_genome_map(self) -> GenomeMap:
        genome_map = GenomeMap()
        for prop in self.properties:
            genome_map.add_property(prop.name, prop.positions, self._converter(prop))
        return genome_map

    def build_definition(self, rng_factory: Optional[RngFactory] = None) -> GenomeDefinition:
        return GenomeDefinition(
            self.build_breeding_algorithm(rng_factory=rng_factory),
            self.build_genome_map(),
        )

    def build_biodiversity_generator(
        self,
        world_seed: Union[str, int],
        gene_mutator: Optional[GeneMutator] = None,
    ) -> BiodiversityGenerator:
        settings = self.biodiversity
        return BiodiversityGenerator(
            world_seed,
            settings.diversity_seed,
            gene_mutator or self.build_mutator(),
            self.base_genome,
            settings.diversity_magnitude,
            settings.area_diversity,
        )


def load_species_config(path: Union[str, Path]) -> SpeciesConfig:
    """Load and validate a species JSON document from disk."""
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except OSError as exc:
        raise ConfigurationError(f"Cannot read species config {file_path}: {exc}") from exc
    config = SpeciesConfig.from_json(data)
    logger.info("Loaded species '%s' from %s", config.name, file_path)
    return config
