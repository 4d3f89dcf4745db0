"""Default tuning constants for breeding and biodiversity."""

# Breeding
DEFAULT_MUTATION_CHANCE = 0.05  # Per-position chance for continuous strands
DEFAULT_MINIMUM_SIMILARITY = 0  # Discrete: shared genes required to breed

# Biodiversity
DEFAULT_DIVERSITY_MAGNITUDE = 3  # Mutation slots per generated genome
DEFAULT_AREA_DIVERSITY = 0.01  # Noise frequency per world unit (1 / 100 units)
DEFAULT_DIVERSITY_SEED = 0

# Step mutator
DEFAULT_MAX_STEP = 1

# Logging
LOG_LEVEL_ENV_VAR = "GENOME_LOG_LEVEL"
BREED_LOG_LEVEL_ENV_VAR = "GENOME_BREED_LOG_LEVEL"  # Quiets per-pair compatibility errors
