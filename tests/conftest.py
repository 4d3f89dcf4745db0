"""Pytest configuration and fixtures for genome tests."""

import pytest

from genome.breed.mutator import VocabularyGeneMutator
from genome.util.rng import FastRandom


class RecordingMutator:
    """Gene mutator that records its calls and bumps the symbol by one."""

    def __init__(self):
        self.calls = []

    def mutate_gene(self, intensity, position, symbol):
        self.calls.append((intensity, position, symbol))
        return chr(ord(symbol) + 1)


class ConstantMutator:
    """Gene mutator that always answers with the same symbol."""

    def __init__(self, symbol="Z"):
        self.symbol = symbol

    def mutate_gene(self, intensity, position, symbol):
        return self.symbol


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return FastRandom(42)


@pytest.fixture
def abcd_mutator():
    return VocabularyGeneMutator("ABCD")


@pytest.fixture
def recording_mutator():
    return RecordingMutator()


@pytest.fixture
def constant_mutator():
    return ConstantMutator()
