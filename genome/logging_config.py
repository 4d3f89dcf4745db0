"""Logging setup for genome tooling.

Compatibility checks log every rejected pair at ERROR, which floods the log
when a population-wide sweep tries many pairings. The breeding loggers
therefore get a level of their own, separate from the package level, while
the biodiversity generator keeps following the package level.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Iterable

from genome.config.defaults import BREED_LOG_LEVEL_ENV_VAR, LOG_LEVEL_ENV_VAR

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "genome"
BREED_LOGGER = "genome.breed"
GENERATOR_LOGGER = "genome.breed.biodiversity"


def _resolve_level(explicit: str | None, env_var: str, fallback: str) -> str:
    raw_level = explicit if explicit is not None else os.getenv(env_var)
    resolved = (raw_level or fallback).upper()
    if not isinstance(logging.getLevelName(resolved), int):
        raise ValueError(f"Unknown log level {raw_level!r}")
    return resolved


def configure_logging(
    *,
    level: str | None = None,
    breed_level: str | None = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    extra_loggers: Iterable[str] | None = None,
) -> logging.Logger:
    """Configure package logging.

    Args:
        level: Package log level. Falls back to ``GENOME_LOG_LEVEL`` or INFO.
        breed_level: Level for breeding compatibility/crossover messages. Falls
            back to ``GENOME_BREED_LOG_LEVEL``, then to the package level.
        format: Log format string.
        datefmt: Date format string.
        extra_loggers: Additional logger names to align with the package level.

    Returns:
        The package logger (``genome``).

    Raises:
        ValueError: If a level name is not a known logging level.
    """
    resolved_level = _resolve_level(level, LOG_LEVEL_ENV_VAR, "INFO")
    resolved_breed = _resolve_level(breed_level, BREED_LOG_LEVEL_ENV_VAR, resolved_level)
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    app_logger = logging.getLogger(PACKAGE_LOGGER)
    app_logger.setLevel(resolved_level)
    logging.getLogger(BREED_LOGGER).setLevel(resolved_breed)
    logging.getLogger(GENERATOR_LOGGER).setLevel(resolved_level)

    for logger_name in extra_loggers or ():
        logging.getLogger(logger_name).setLevel(resolved_level)

    app_logger.debug(
        "Logging configured", extra={"level": resolved_level, "breed_level": resolved_breed}
    )
    return app_logger


def describe_logging() -> Dict[str, str]:
    """Effective level names of the package, breeding, and generator loggers."""
    return {
        name: logging.getLevelName(logging.getLogger(name).getEffectiveLevel())
        for name in (PACKAGE_LOGGER, BREED_LOGGER, GENERATOR_LOGGER)
    }
