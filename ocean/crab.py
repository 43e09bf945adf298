"""
Crab runtime representation.

Crabs are immutable once built. A beach holds them in insertion order
and hands out the objects themselves for read-only queries.
"""

from dataclasses import dataclass

from .color import Color
from .diet import Diet


@dataclass(frozen=True)
class Crab:
    """
    A crab living on a beach.

    Attributes:
        name: Crab name (not unique across a beach)
        speed: Non-negative integer speed
        color: Shell color
        diet: What the crab eats
    """
    name: str
    speed: int
    color: Color
    diet: Diet

    def __post_init__(self):
        """Validate speed and field types"""
        if isinstance(self.speed, bool) or not isinstance(self.speed, int):
            raise ValueError(f"Crab speed must be an int, got {self.speed!r}")
        if self.speed < 0:
            raise ValueError(f"Crab speed must be non-negative, got {self.speed}")
        if not isinstance(self.color, Color):
            raise ValueError(f"Crab color must be a Color, got {self.color!r}")
        if not isinstance(self.diet, Diet):
            raise ValueError(f"Crab diet must be a Diet, got {self.diet!r}")

    def to_dict(self) -> dict:
        """
        Convert crab to a plain dict.

        Returns:
            Dict with all crab fields (diet as its string value)
        """
        return {
            'name': self.name,
            'speed': self.speed,
            'color': self.color.to_dict(),
            'diet': self.diet.value,
        }
