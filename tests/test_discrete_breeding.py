"""Tests for the discrete and monoculture breeding algorithms."""

import pytest

from genome.breed.discrete import (
    DiscreteBreedingAlgorithm,
    MonocultureBreedingAlgorithm,
    similarity,
)
from genome.exceptions import ConfigurationError, IncompatibleGenomesError
from genome.util.rng import FastRandom


def test_similarity():
    assert similarity("ABCD", "ABXX") == 2
    assert similarity("AAAA", "AAAA") == 4
    assert similarity("", "") == 0


class TestDiscreteBreedingAlgorithm:
    def test_minimum_similarity_gate(self, abcd_mutator):
        algorithm = DiscreteBreedingAlgorithm(2, 0.0, abcd_mutator)
        assert algorithm.can_cross("ABCD", "ABXX")
        assert not algorithm.can_cross("ABCD", "AXXX")

    def test_length_validation_still_applies(self, abcd_mutator):
        algorithm = DiscreteBreedingAlgorithm(0, 0.0, abcd_mutator)
        assert not algorithm.can_cross("AA", "AAA")
        assert not algorithm.can_cross(None, "AA")

    def test_symmetric(self, abcd_mutator):
        algorithm = DiscreteBreedingAlgorithm(2, 0.0, abcd_mutator)
        for a, b in [("ABCD", "ABXX"), ("ABCD", "AXXX"), ("AB", "ABC")]:
            assert algorithm.can_cross(a, b) == algorithm.can_cross(b, a)

    def test_offspring_from_parents(self, abcd_mutator):
        algorithm = DiscreteBreedingAlgorithm(0, 0.0, abcd_mutator)
        for _ in range(50):
            child = algorithm.produce_cross("AABB", "CCDD")
            assert all(symbol in pair for symbol, pair in zip(child, ["AC", "AC", "BD", "BD"]))

    def test_single_point_mutation(self, constant_mutator):
        """A certain mutation changes exactly one gene."""
        algorithm = DiscreteBreedingAlgorithm(0, 1.0, constant_mutator)
        for _ in range(20):
            child = algorithm.produce_cross("AAAA", "AAAA")
            assert child.count("Z") == 1
            assert len(child) == 4

    def test_reproducible_with_factory(self, abcd_mutator):
        a = DiscreteBreedingAlgorithm(0, 0.5, abcd_mutator, rng_factory=lambda: FastRandom(5))
        b = DiscreteBreedingAlgorithm(0, 0.5, abcd_mutator, rng_factory=lambda: FastRandom(5))
        assert a.produce_cross("ABCDABCD", "BADCBADC") == b.produce_cross("ABCDABCD", "BADCBADC")

    def test_too_different_raises(self, abcd_mutator):
        algorithm = DiscreteBreedingAlgorithm(3, 0.0, abcd_mutator)
        with pytest.raises(IncompatibleGenomesError):
            algorithm.produce_cross("ABCD", "XXXX")

    def test_missing_mutator_rejected(self):
        with pytest.raises(ConfigurationError):
            DiscreteBreedingAlgorithm(0, 0.1, None)
        with pytest.raises(ConfigurationError):
            MonocultureBreedingAlgorithm(0.1, None)

    def test_negative_similarity_rejected(self, abcd_mutator):
        with pytest.raises(ConfigurationError):
            DiscreteBreedingAlgorithm(-1, 0.0, abcd_mutator)


class TestMonocultureBreedingAlgorithm:
    def test_only_identical_genomes(self, abcd_mutator):
        algorithm = MonocultureBreedingAlgorithm(0.0, abcd_mutator)
        assert algorithm.can_cross("ABCD", "ABCD")
        assert not algorithm.can_cross("ABCD", "ABCC")
        assert not algorithm.can_cross("ABCD", None)

    def test_offspring_is_clone_without_mutation(self, abcd_mutator):
        algorithm = MonocultureBreedingAlgorithm(0.0, abcd_mutator)
        assert algorithm.produce_cross("ABCD", "ABCD") == "ABCD"

    def test_offspring_may_mutate(self, constant_mutator):
        algorithm = MonocultureBreedingAlgorithm(1.0, constant_mutator)
        child = algorithm.produce_cross("ABCD", "ABCD")
        assert child.count("Z") == 1
