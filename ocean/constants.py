"""
Central configuration constants for the beach simulation.

Defines default values and limits used across multiple modules.
"""

# ============================================================================
# Breeding Configuration
# ============================================================================

# Every bred crab starts at this speed regardless of its parents
BREED_SPEED = 1

# Seed used by Beach() when the caller does not supply one
DEFAULT_BEACH_SEED = 0


# ============================================================================
# Color Configuration
# ============================================================================

# Inclusive upper bound of an RGB channel (channels wrap at +1)
COLOR_CHANNEL_MAX = 255


# ============================================================================
# Spawning Configuration
# ============================================================================

# Inclusive speed range for spawned crabs
SPAWN_MIN_SPEED = 1
SPAWN_MAX_SPEED = 20

# Name prefix for spawned crabs ("{prefix}-{index:04d}")
SPAWN_NAME_PREFIX = "crab"
