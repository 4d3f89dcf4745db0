import logging

import pytest

from genome.logging_config import configure_logging, describe_logging


@pytest.fixture(autouse=True)
def restore_levels(monkeypatch):
    """Keep level changes made here from leaking into other test modules."""
    monkeypatch.delenv("GENOME_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GENOME_BREED_LOG_LEVEL", raising=False)
    names = ("genome", "genome.breed", "genome.breed.biodiversity")
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_explicit_level():
    logger = configure_logging(level="warning")
    assert logger.name == "genome"
    assert logger.level == logging.WARNING


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("GENOME_LOG_LEVEL", "debug")
    assert configure_logging().level == logging.DEBUG


def test_extra_loggers():
    configure_logging(extra_loggers=["genome.test.extra"])
    assert logging.getLogger("genome.test.extra").level == logging.INFO


class TestBreedLevel:
    def test_defaults_to_package_level(self):
        configure_logging(level="warning")
        assert describe_logging() == {
            "genome": "WARNING",
            "genome.breed": "WARNING",
            "genome.breed.biodiversity": "WARNING",
        }

    def test_breed_level_leaves_generator_alone(self):
        """Quieting breeding checks keeps the generator at the package level."""
        configure_logging(level="info", breed_level="critical")
        levels = describe_logging()
        assert levels["genome"] == "INFO"
        assert levels["genome.breed"] == "CRITICAL"
        assert levels["genome.breed.biodiversity"] == "INFO"

    def test_breed_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("GENOME_BREED_LOG_LEVEL", "error")
        configure_logging(level="debug")
        assert describe_logging()["genome.breed"] == "ERROR"

    def test_rejected_pairs_silenced(self, abcd_mutator, caplog):
        from genome.breed.continuous import ContinuousBreedingAlgorithm

        configure_logging(level="info", breed_level="critical")
        with caplog.at_level(logging.INFO, logger="genome"):
            ContinuousBreedingAlgorithm(0.1, abcd_mutator).can_cross("AA", "AAA")
        assert "incorrect length" not in caplog.text


class TestUnknownLevel:
    def test_package_level(self):
        with pytest.raises(ValueError):
            configure_logging(level="loud")

    def test_breed_level(self):
        with pytest.raises(ValueError):
            configure_logging(breed_level="quiet")
