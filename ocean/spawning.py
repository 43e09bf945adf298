"""
Crab spawning.

Builds crabs with deterministic speed, color and diet from a world seed,
so the same seed always populates the same beach.
"""

from typing import List

from .beach import Beach
from .color import Color
from .crab import Crab
from .diet import Diet
from .rng import make_seed, random_int
from .constants import SPAWN_MIN_SPEED, SPAWN_MAX_SPEED, SPAWN_NAME_PREFIX


def spawn_crabs(
    count: int,
    world_seed: int,
    name_prefix: str = SPAWN_NAME_PREFIX,
    min_speed: int = SPAWN_MIN_SPEED,
    max_speed: int = SPAWN_MAX_SPEED
) -> List[Crab]:
    """
    Spawn crabs from a world seed.

    Args:
        count: Number of crabs to spawn
        world_seed: World generation seed
        name_prefix: Crab names are "{name_prefix}-{index:04d}"
        min_speed: Smallest speed (inclusive)
        max_speed: Largest speed (inclusive)

    Returns:
        List of spawned crabs, in index order

    Example:
        crabs = spawn_crabs(10, world_seed=42, name_prefix="reef")
    """
    if count < 0:
        raise ValueError(f"Cannot spawn {count} crabs")
    if min_speed < 0:
        raise ValueError(f"Spawn speed must be non-negative, got min_speed={min_speed}")

    crabs = []

    for i in range(count):
        # Deterministic seed per crab
        crab_seed = make_seed(world_seed, name_prefix, i)

        crabs.append(Crab(
            name=f"{name_prefix}-{i:04d}",
            speed=random_int(make_seed(crab_seed, "speed"), min_speed, max_speed),
            color=Color.random(make_seed(crab_seed, "color")),
            diet=Diet.random_diet(make_seed(crab_seed, "diet"))
        ))

    return crabs


def populate_beach(beach: Beach, count: int, world_seed: int, **spawn_kwargs) -> int:
    """
    Spawn crabs and add them to the end of a beach.

    Args:
        beach: Beach to populate
        count: Number of crabs to spawn
        world_seed: World generation seed
        **spawn_kwargs: Forwarded to spawn_crabs()

    Returns:
        Number of crabs added
    """
    spawned = spawn_crabs(count, world_seed, **spawn_kwargs)
    for crab in spawned:
        beach.add_crab(crab)

    print(f"[OK] Spawned {len(spawned)} crabs (seed={world_seed}), beach now holds {beach.size()}")
    return len(spawned)
