"""
Ocean Beach Simulation

A small, deterministic, in-memory model of crabs living on a beach.
Crabs are grouped into clans, compared by speed, and bred into new crabs.

Architecture: Beach is the source of truth. It owns its crabs and its
clan system; callers only read what it hands out.
"""

from .beach import Beach
from .clans import ClanSystem
from .color import Color
from .crab import Crab
from .diet import Diet
from .errors import OceanError, ClanNotFoundError, CrabNotFoundError

__version__ = "0.1.0"

__all__ = [
    "Beach",
    "ClanSystem",
    "Color",
    "Crab",
    "Diet",
    "OceanError",
    "ClanNotFoundError",
    "CrabNotFoundError",
]
