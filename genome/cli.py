"""Command-line entry point for sampling and crossing genomes.

Examples:
  # Genomes of a wild population on a 4x4 grid, 50 units apart
  python -m genome sample --world-seed meadow --base-genome AAAA --vocabulary ABCD

  # Same, using a species document
  python -m genome sample --species meadow_flower.json --world-seed meadow --grid 8 --spacing 25

  # Cross two genomes
  python -m genome cross AABB CCDD --vocabulary ABCD --mutation-chance 0.1
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from genome.config.defaults import (
    DEFAULT_AREA_DIVERSITY,
    DEFAULT_DIVERSITY_MAGNITUDE,
    DEFAULT_DIVERSITY_SEED,
    DEFAULT_MUTATION_CHANCE,
)
from genome.config.species import (
    BiodiversitySettings,
    BreedingSettings,
    MutatorSettings,
    SpeciesConfig,
    load_species_config,
)
from genome.exceptions import GenomeError
from genome.logging_config import configure_logging
from genome.util.rng import FastRandom

logger = logging.getLogger(__name__)


def _species_from_args(args: argparse.Namespace, base_genome: Optional[str]) -> SpeciesConfig:
    if args.species:
        return load_species_config(args.species)
    return SpeciesConfig(
        name="cli",
        base_genome=base_genome or args.vocabulary[:1] * 4,
        mutator=MutatorSettings(kind="vocabulary", vocabulary=args.vocabulary),
        breeding=BreedingSettings(
            algorithm=getattr(args, "algorithm", "continuous"),
            mutation_chance=getattr(args, "mutation_chance", DEFAULT_MUTATION_CHANCE),
            minimum_similarity=getattr(args, "minimum_similarity", 0),
        ),
        biodiversity=BiodiversitySettings(
            diversity_seed=getattr(args, "diversity_seed", DEFAULT_DIVERSITY_SEED),
            diversity_magnitude=getattr(args, "diversity_magnitude", DEFAULT_DIVERSITY_MAGNITUDE),
            area_diversity=getattr(args, "area_diversity", DEFAULT_AREA_DIVERSITY),
        ),
    )


def run_sample(args: argparse.Namespace) -> int:
    """Print generated genomes for a square grid of locations."""
    species = _species_from_args(args, args.base_genome)
    generator = species.build_biodiversity_generator(args.world_seed)
    logger.info("Sampling %r over a %dx%d grid", generator, args.grid, args.grid)
    for gy in range(args.grid):
        row = [
            generator.generate_genes((gx * args.spacing, gy * args.spacing))
            for gx in range(args.grid)
        ]
        print(" ".join(row))
    return 0


def run_cross(args: argparse.Namespace) -> int:
    """Cross two genomes and print the offspring."""
    species = _species_from_args(args, args.genes1)
    rng_factory = None
    if args.seed is not None:
        seeder = FastRandom(args.seed)
        rng_factory = lambda: FastRandom(seeder.next_int())  # noqa: E731
    algorithm = species.build_breeding_algorithm(rng_factory=rng_factory)
    if not algorithm.can_cross(args.genes1, args.genes2):
        logger.error("%s cannot cross %s with %s", type(algorithm).__name__, args.genes1, args.genes2)
        return 1
    for _ in range(args.count):
        print(algorithm.produce_cross(args.genes1, args.genes2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genome",
        description="Spatial biodiversity and breeding for simulated organisms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: GENOME_LOG_LEVEL or INFO)")
    parser.add_argument(
        "--breed-log-level",
        default=None,
        help="Log level for breeding checks (default: GENOME_BREED_LOG_LEVEL or --log-level)",
    )
    parser.add_argument("--species", default=None, metavar="FILE", help="Species JSON document")
    parser.add_argument(
        "--vocabulary", default="ABCD", help="Symbols the mutator may produce (default: ABCD)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sample = subparsers.add_parser("sample", help="Generate genomes across a grid of locations")
    sample.add_argument("--world-seed", default="world", help="World seed (text or integer)")
    sample.add_argument("--base-genome", default=None, help="Base genome (default: 4x first symbol)")
    sample.add_argument("--diversity-seed", type=int, default=DEFAULT_DIVERSITY_SEED)
    sample.add_argument("--diversity-magnitude", type=int, default=DEFAULT_DIVERSITY_MAGNITUDE)
    sample.add_argument("--area-diversity", type=float, default=DEFAULT_AREA_DIVERSITY)
    sample.add_argument("--grid", type=int, default=4, help="Grid size per side (default: 4)")
    sample.add_argument("--spacing", type=float, default=50.0, help="Distance between samples")
    sample.set_defaults(handler=run_sample)

    cross = subparsers.add_parser("cross", help="Cross two genomes")
    cross.add_argument("genes1")
    cross.add_argument("genes2")
    cross.add_argument(
        "--algorithm", choices=("continuous", "discrete", "monoculture"), default="continuous"
    )
    cross.add_argument("--mutation-chance", type=float, default=DEFAULT_MUTATION_CHANCE)
    cross.add_argument("--minimum-similarity", type=int, default=0)
    cross.add_argument("--count", type=int, default=1, help="Number of offspring to print")
    cross.add_argument("--seed", type=int, default=None, help="Seed for reproducible crossovers")
    cross.set_defaults(handler=run_cross)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse command-line arguments and run the chosen command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # world seeds that look like integers are used as integers
    world_seed = getattr(args, "world_seed", None)
    if isinstance(world_seed, str) and world_seed.lstrip("-").isdigit():
        args.world_seed = int(world_seed)

    try:
        configure_logging(level=args.log_level, breed_level=args.breed_log_level)
        return args.handler(args)
    except (GenomeError, ValueError) as exc:
        logger.error("Error: %s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
