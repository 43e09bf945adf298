"""
Deterministic RNG utilities for the beach simulation.

Uses SHA256 hashing to derive stable seeds from hierarchical components
(beach_seed, operation, crab_index, crab_name). All randomness uses
numpy.random.Generator(PCG64) for reproducible cross-session results.
"""

import hashlib
import numpy as np
from typing import Any, Optional, Tuple

from .constants import COLOR_CHANNEL_MAX


def make_seed(*components: Any) -> int:
    """
    Generate deterministic 64-bit seed from hierarchical components.

    Uses SHA256 to hash components into stable seed value.

    Args:
        *components: Seed components (beach_seed, "breed", crab_index, etc.)

    Returns:
        64-bit integer seed for numpy RNG

    Example:
        crab_seed = make_seed(world_seed, "spawn", crab_index)
        diet_seed = make_seed(crab_seed, "diet")
    """
    # Join all components with colon separator
    hash_input = ":".join(str(c) for c in components)

    # SHA256 hash and extract 64-bit integer
    hash_bytes = hashlib.sha256(hash_input.encode('utf-8')).digest()
    seed = int.from_bytes(hash_bytes[:8], byteorder='big')

    return seed


def make_generator(seed: Optional[int] = None) -> np.random.Generator:
    """Build a PCG64 generator (seed=None draws fresh OS entropy)"""
    return np.random.Generator(np.random.PCG64(seed))


def random_choice_index(seed: Optional[int], n: int) -> int:
    """
    Pick a uniformly random index in [0, n).

    Args:
        seed: RNG seed (from make_seed()), or None for a non-reproducible pick
        n: Number of options, must be positive

    Returns:
        Index in [0, n)
    """
    if n <= 0:
        raise ValueError(f"Cannot choose from {n} options")
    rng = make_generator(seed)
    return int(rng.integers(0, n))


def random_int(seed: Optional[int], low: int, high: int) -> int:
    """
    Generate a random integer in the inclusive range [low, high].

    Args:
        seed: RNG seed
        low: Smallest value
        high: Largest value

    Returns:
        Random integer in [low, high]
    """
    if low > high:
        raise ValueError(f"Empty range [{low}, {high}]")
    rng = make_generator(seed)
    return int(rng.integers(low, high, endpoint=True))


def random_color_channels(seed: Optional[int]) -> Tuple[int, int, int]:
    """
    Generate a random (r, g, b) triple, each channel in [0, COLOR_CHANNEL_MAX].

    Args:
        seed: RNG seed

    Returns:
        Tuple of three ints
    """
    rng = make_generator(seed)
    r, g, b = rng.integers(0, COLOR_CHANNEL_MAX, size=3, endpoint=True)
    return int(r), int(g), int(b)
