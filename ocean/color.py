"""
Crab shell color.

Colors are RGB triples. Breeding crosses two parent colors channel by
channel, wrapping around at COLOR_CHANNEL_MAX + 1.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import COLOR_CHANNEL_MAX
from .rng import random_color_channels


@dataclass(frozen=True)
class Color:
    """
    RGB shell color.

    Attributes:
        r: Red channel in [0, 255]
        g: Green channel in [0, 255]
        b: Blue channel in [0, 255]
    """
    r: int
    g: int
    b: int

    def __post_init__(self):
        """Reject channels outside [0, COLOR_CHANNEL_MAX]"""
        for channel, value in (('r', self.r), ('g', self.g), ('b', self.b)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Color channel {channel} must be an int, got {value!r}")
            if not 0 <= value <= COLOR_CHANNEL_MAX:
                raise ValueError(
                    f"Color channel {channel}={value} outside [0, {COLOR_CHANNEL_MAX}]"
                )

    @classmethod
    def cross(cls, first: 'Color', second: 'Color') -> 'Color':
        """
        Cross two colors into a child color.

        Each channel is the wrapping sum of the parents' channels.

        Args:
            first: First parent color
            second: Second parent color

        Returns:
            Child color
        """
        modulus = COLOR_CHANNEL_MAX + 1
        return cls(
            r=(first.r + second.r) % modulus,
            g=(first.g + second.g) % modulus,
            b=(first.b + second.b) % modulus,
        )

    @classmethod
    def random(cls, seed: Optional[int] = None) -> 'Color':
        """Random color (reproducible when seeded)"""
        return cls(*random_color_channels(seed))

    @classmethod
    def red(cls) -> 'Color':
        return cls(COLOR_CHANNEL_MAX, 0, 0)

    @classmethod
    def green(cls) -> 'Color':
        return cls(0, COLOR_CHANNEL_MAX, 0)

    @classmethod
    def blue(cls) -> 'Color':
        return cls(0, 0, COLOR_CHANNEL_MAX)

    def to_dict(self) -> dict:
        return {'r': self.r, 'g': self.g, 'b': self.b}
