"""
Beach aggregate.

A Beach owns an ordered, append-only collection of crabs and exactly one
ClanSystem. Clan membership and speed comparisons go through the Beach,
which delegates name storage to its ClanSystem.
"""

from typing import Iterator, List, Optional, Sequence

from .clans import ClanSystem
from .color import Color
from .constants import BREED_SPEED, DEFAULT_BEACH_SEED
from .crab import Crab
from .diet import Diet
from .errors import ClanNotFoundError, CrabNotFoundError
from .rng import make_seed


class Beach:
    """
    Crabs on a beach, plus their clans.

    Crabs are never removed. Insertion and breeding both append, so the
    order of crabs records the beach's history.
    """

    def __init__(self, seed: int = DEFAULT_BEACH_SEED):
        """
        Args:
            seed: Beach seed; bred crab diets are derived from it
        """
        self.seed = seed
        self._crabs: List[Crab] = []
        self._clan_system = ClanSystem()

    def size(self) -> int:
        """Number of crabs on the beach"""
        return len(self._crabs)

    def __len__(self) -> int:
        return len(self._crabs)

    def add_crab(self, crab: Crab):
        """Append a crab to the end of the beach"""
        self._crabs.append(crab)

    def get_crab(self, index: int) -> Crab:
        """
        Get the crab at a position.

        Args:
            index: Position in [0, size())

        Returns:
            Crab at index

        Raises:
            IndexError: If index is outside [0, size())
        """
        if not 0 <= index < len(self._crabs):
            raise IndexError(f"Crab index {index} out of range for beach of size {len(self._crabs)}")
        return self._crabs[index]

    def crabs(self) -> Iterator[Crab]:
        """Fresh iterator over the crabs in storage order"""
        return iter(self._crabs)

    def __iter__(self) -> Iterator[Crab]:
        return self.crabs()

    def get_fastest_crab(self) -> Optional[Crab]:
        """
        Get the fastest crab.

        Among crabs sharing the top speed, the last one on the beach wins.

        Returns:
            Fastest crab, or None if the beach is empty
        """
        fastest = None
        for crab in self._crabs:
            if fastest is None or crab.speed >= fastest.speed:
                fastest = crab
        return fastest

    def find_crabs_by_name(self, name: str) -> List[Crab]:
        """Every crab named exactly `name`, in storage order"""
        return [crab for crab in self._crabs if crab.name == name]

    def breed_crabs(self, i: int, j: int, name: str):
        """
        Breed the crabs at positions i and j.

        The child is appended to the end of the beach with BREED_SPEED,
        the crossed color of its parents and a seeded random diet.

        Raises:
            IndexError: If either index is out of range
        """
        first = self.get_crab(i)
        second = self.get_crab(j)

        diet_seed = make_seed(self.seed, "breed", len(self._crabs), name)
        self._crabs.append(Crab(
            name=name,
            speed=BREED_SPEED,
            color=Color.cross(first.color, second.color),
            diet=Diet.random_diet(diet_seed)
        ))

    def get_clan_system(self) -> ClanSystem:
        """The clan system owned by this beach"""
        return self._clan_system

    def add_member_to_clan(self, clan_id: str, crab_name: str):
        """
        Record crab_name as a member of clan_id.

        A crab should belong to only one clan. This is not enforced; a
        warning is printed when the name is unknown on the beach or
        already listed under another clan.
        """
        if not self.find_crabs_by_name(crab_name):
            print(f"[WARN] Crab {crab_name} not on beach, adding to clan {clan_id} anyway")

        other_clans = [c for c in self._clan_system.find_clans_of(crab_name) if c != clan_id]
        if other_clans:
            print(f"[WARN] Crab {crab_name} already in clan(s) {', '.join(other_clans)}, "
                  f"also adding to {clan_id}")

        self._clan_system.add_crab_name(clan_id, crab_name)

    def get_winner_clan(self, id1: str, id2: str) -> Optional[str]:
        """
        Compare two clans by the average speed of their members.

        Args:
            id1: First clan id
            id2: Second clan id

        Returns:
            Id of the faster clan, or None if the averages are equal

        Raises:
            ClanNotFoundError: If either clan has no members
        """
        clan1 = self._clan_system.get_clan_member_names(id1)
        if not clan1:
            raise ClanNotFoundError(id1)
        clan2 = self._clan_system.get_clan_member_names(id2)
        if not clan2:
            raise ClanNotFoundError(id2)

        avg1 = self.get_crabs_avg_speed(clan1)
        avg2 = self.get_crabs_avg_speed(clan2)

        if avg1 == avg2:
            return None
        return id1 if avg1 > avg2 else id2

    def get_crabs_avg_speed(self, names: Sequence[str]) -> int:
        """
        Average speed of the named crabs (integer floor division).

        Each name counts once, using the first crab with that name.

        Returns:
            Average speed, 0 for an empty list

        Raises:
            CrabNotFoundError: If a name matches no crab
        """
        if not names:
            return 0

        speed_sum = 0
        for name in names:
            matches = self.find_crabs_by_name(name)
            if not matches:
                raise CrabNotFoundError(name)
            speed_sum += matches[0].speed

        return speed_sum // len(names)

    def __repr__(self) -> str:
        return f"Beach(seed={self.seed}, crabs={len(self._crabs)}, clans={self._clan_system.get_clan_count()})"
