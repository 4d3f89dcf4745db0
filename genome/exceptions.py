"""Genome exception hierarchy.

Centralised base classes so callers can catch genetics failures narrowly
instead of relying on bare ``except Exception`` blocks.
"""


class GenomeError(Exception):
    """Root of all genome-domain exceptions."""


class ConfigurationError(GenomeError):
    """Invalid generator, mutator, or species configuration."""


class IncompatibleGenomesError(GenomeError, ValueError):
    """A crossover was attempted on genomes that cannot be crossed.

    Compatibility checks report this condition as ``False``; reaching a
    crossover with such a pair is a programming error.
    """


class GenomeMapError(GenomeError):
    """Unknown genome map property or a property outside the genome."""
