"""
Exception types raised by the beach simulation.
"""


class OceanError(Exception):
    """Base class for beach simulation errors"""
    pass


class ClanNotFoundError(OceanError, LookupError):
    """Raised when a clan id has no members"""

    def __init__(self, clan_id: str):
        self.clan_id = clan_id
        super().__init__(f"No clan named {clan_id}")


class CrabNotFoundError(OceanError, LookupError):
    """Raised when no crab on the beach carries the requested name"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No crab named {name} on the beach")
