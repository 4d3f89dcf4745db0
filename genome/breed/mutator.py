"""Gene mutators: the pluggable per-species mutation capability.

A mutator maps ``(intensity, position, symbol)`` to a possibly different
symbol. Mutators must be pure functions of those three inputs - the
biodiversity generator's determinism depends on it - so none of the
implementations below hold mutable state.

Mutator Types:
- Vocabulary: table-driven, picks a symbol from a fixed alphabet
- Positional: one alphabet per gene position (discrete trait sets)
- Step: ordered alphabet treated as a numeric scale (continuous traits)
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from genome.exceptions import ConfigurationError


@runtime_checkable
class GeneMutator(Protocol):
    """Protocol for per-species gene mutation."""

    def mutate_gene(self, intensity: float, position: int, symbol: str) -> str:
        """Return the mutated symbol.

        Args:
            intensity: Mutation input in [0, 1)
            position: Index of the gene within the genome
            symbol: Current symbol at that position

        Returns:
            The new symbol (may equal ``symbol``)
        """
        ...


def _pick(vocabulary: str, intensity: float) -> str:
    index = int(intensity * len(vocabulary))
    return vocabulary[max(0, min(len(vocabulary) - 1, index))]


def _require_vocabulary(vocabulary: Optional[str], context: str) -> str:
    if not vocabulary:
        raise ConfigurationError(f"{context}: vocabulary must not be empty")
    return vocabulary


class VocabularyGeneMutator:
    """Replaces a gene with a vocabulary symbol chosen by intensity."""

    def __init__(self, vocabulary: str):
        self.vocabulary = _require_vocabulary(vocabulary, "VocabularyGeneMutator")

    def mutate_gene(self, intensity: float, position: int, symbol: str) -> str:
        return _pick(self.vocabulary, intensity)

    def __repr__(self) -> str:
        return f"VocabularyGeneMutator({self.vocabulary!r})"


class PositionalVocabularyGeneMutator:
    """Uses a separate vocabulary for each gene position.

    Positions past the end of ``vocabularies`` are not mutable and keep
    their current symbol.
    """

    def __init__(self, vocabularies: Sequence[str]):
        self.vocabularies = tuple(
            _require_vocabulary(v, f"PositionalVocabularyGeneMutator[{i}]")
            for i, v in enumerate(vocabularies)
        )

    def mutate_gene(self, intensity: float, position: int, symbol: str) -> str:
        if position < 0 or position >= len(self.vocabularies):
            return symbol
        return _pick(self.vocabularies[position], intensity)


class StepGeneMutator:
    """Treats an ordered vocabulary as a numeric scale and steps along it.

    Intensity below 0.5 steps down, above 0.5 steps up; the distance grows
    with how far intensity is from 0.5, up to ``max_step``. Results are
    clamped to the ends of the scale. Symbols outside the vocabulary are
    returned unchanged.
    """

    def __init__(self, vocabulary: str, max_step: int = 1):
        self.vocabulary = _require_vocabulary(vocabulary, "StepGeneMutator")
        if max_step < 1:
            raise ConfigurationError(f"StepGeneMutator: max_step must be >= 1, got {max_step}")
        self.max_step = max_step

    def mutate_gene(self, intensity: float, position: int, symbol: str) -> str:
        index = self.vocabulary.find(symbol)
        if index < 0:
            return symbol
        # Map [0, 1) onto the 2 * max_step + 1 offsets -max_step..max_step
        offset = int(intensity * (2 * self.max_step + 1)) - self.max_step
        offset = max(-self.max_step, min(self.max_step, offset))
        new_index = max(0, min(len(self.vocabulary) - 1, index + offset))
        return self.vocabulary[new_index]
