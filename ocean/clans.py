"""
Clan membership registry.

Maps clan ids to the ordered names of their members. A clan exists only
once a member has been added; unknown ids read as empty clans.
"""

from typing import Dict, List, Optional


class ClanSystem:
    """
    Registry of clans and their member names.

    Member lists keep insertion order and may hold duplicates. The registry
    does not check that a crab belongs to a single clan; use
    find_clans_of() to audit that.
    """

    def __init__(self):
        self._clans: Dict[str, List[str]] = {}

    def get_clan_member_names(self, clan_id: str) -> List[str]:
        """
        Get the member names of a clan.

        Returns:
            Copy of the member list, or [] if clan_id is unknown
        """
        return list(self._clans.get(clan_id, []))

    def get_clan_count(self) -> int:
        """Number of clans currently registered"""
        return len(self._clans)

    def get_clan_member_count(self, clan_id: str) -> int:
        """Number of members in a clan, 0 if unknown"""
        return len(self._clans.get(clan_id, []))

    def get_largest_clan_id(self) -> Optional[str]:
        """
        Get the id of the clan with the most members.

        Ties resolve to the lexicographically smallest id so the answer
        does not depend on insertion order.

        Returns:
            Clan id, or None if no clans exist
        """
        if not self._clans:
            return None
        return min(self._clans, key=lambda clan_id: (-len(self._clans[clan_id]), clan_id))

    def add_crab_name(self, clan_id: str, crab_name: str):
        """
        Add a crab name to a clan, creating the clan if it is new.

        Args:
            clan_id: Clan to join
            crab_name: Member name (duplicates are kept)
        """
        self._clans.setdefault(clan_id, []).append(crab_name)

    def get_clan_ids(self) -> List[str]:
        """Sorted list of registered clan ids"""
        return sorted(self._clans)

    def find_clans_of(self, crab_name: str) -> List[str]:
        """Sorted ids of every clan listing crab_name"""
        return sorted(clan_id for clan_id, names in self._clans.items() if crab_name in names)

    def __repr__(self) -> str:
        return f"ClanSystem(clans={self._clans!r})"
