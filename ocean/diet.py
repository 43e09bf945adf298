"""
Crab diets.
"""

from enum import Enum
from typing import Optional

from .rng import random_choice_index


class Diet(Enum):
    """What a crab eats"""
    SHELLFISH = "shellfish"
    PLANTS = "plants"
    GARBAGE = "garbage"

    @classmethod
    def random_diet(cls, seed: Optional[int] = None) -> 'Diet':
        """
        Pick a diet uniformly at random.

        Args:
            seed: RNG seed (from make_seed()); None gives a non-reproducible pick

        Returns:
            One of the Diet members
        """
        options = list(cls)
        return options[random_choice_index(seed, len(options))]
