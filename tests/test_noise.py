"""Tests for simplex noise fields and alpha remapping."""

import pytest

from genome.noise import (
    IdentityAlphaFunction,
    SimplexNoise,
    UniformNoiseAlpha,
    clamp,
    floor_to_int,
    noise_to_unit,
)


def _grid(step=0.37, size=30):
    return [(gx * step, gy * step) for gx in range(size) for gy in range(size)]


class TestSimplexNoise:
    def test_deterministic_for_seed(self):
        """Two fields with the same seed agree everywhere."""
        a = SimplexNoise(99)
        b = SimplexNoise(99)
        for x, y in _grid():
            assert a.noise(x, y) == b.noise(x, y)

    def test_output_range(self):
        field = SimplexNoise(7)
        for x, y in _grid():
            assert -1.05 <= field.noise(x, y) <= 1.05

    def test_varies_over_space(self):
        field = SimplexNoise(7)
        values = {round(field.noise(x, y), 6) for x, y in _grid()}
        assert len(values) > 100

    def test_different_seeds_differ(self):
        a = SimplexNoise(1)
        b = SimplexNoise(2)
        assert any(a.noise(x, y) != b.noise(x, y) for x, y in _grid())

    def test_negated_seed_gives_different_field(self):
        a = SimplexNoise(5)
        b = SimplexNoise(-5)
        assert any(a.noise(x, y) != b.noise(x, y) for x, y in _grid())

    def test_negative_seed_and_coordinates(self):
        field = SimplexNoise(-12345)
        value = field.noise(-10.5, -3.25)
        assert -1.05 <= value <= 1.05

    def test_continuity(self):
        """Nearby samples are close to each other."""
        field = SimplexNoise(3)
        assert abs(field.noise(1.0, 1.0) - field.noise(1.001, 1.0)) < 0.05


class TestHelpers:
    def test_clamp(self):
        assert clamp(-0.5) == 0.0
        assert clamp(1.5) == 1.0
        assert clamp(0.25) == 0.25

    def test_floor_to_int(self):
        assert floor_to_int(3.9) == 3
        assert floor_to_int(-0.1) == -1

    def test_noise_to_unit(self):
        assert noise_to_unit(-1.0) == 0.0
        assert noise_to_unit(0.0) == 0.5
        assert noise_to_unit(1.0) == 1.0
        assert noise_to_unit(1.2) == 1.0


class TestAlphaFunctions:
    def test_identity_is_singleton(self):
        assert IdentityAlphaFunction.singleton() is IdentityAlphaFunction.singleton()
        assert IdentityAlphaFunction.singleton().apply(0.3) == 0.3

    def test_uniform_alpha_endpoints(self):
        alpha = UniformNoiseAlpha(IdentityAlphaFunction.singleton())
        assert alpha.apply(0.0) <= 0.01
        assert alpha.apply(1.0) >= 0.99

    def test_uniform_alpha_is_monotonic(self):
        alpha = UniformNoiseAlpha()
        outputs = [alpha.apply(i / 100.0) for i in range(101)]
        assert outputs == sorted(outputs)
        assert all(0.0 <= v <= 1.0 for v in outputs)

    def test_uniform_alpha_spreads_noise(self):
        """Corrected noise reaches the outer quarters far more often than raw noise."""
        alpha = UniformNoiseAlpha()
        field = SimplexNoise(2024)
        raw = [noise_to_unit(field.noise(x, y)) for x, y in _grid(step=0.41, size=40)]
        corrected = [alpha.apply(v) for v in raw]

        def outer(values):
            return sum(1 for v in values if v < 0.25 or v >= 0.75) / len(values)

        assert outer(corrected) > outer(raw)
        assert 0.35 <= outer(corrected) <= 0.65

    def test_uniform_alpha_applies_inner(self):
        class Halve:
            def apply(self, value):
                return value / 2

        assert UniformNoiseAlpha(Halve()).apply(1.0) == pytest.approx(0.5)
