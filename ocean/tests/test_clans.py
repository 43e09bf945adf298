"""
Tests for the clan registry.
"""

from ocean.clans import ClanSystem


def test_unknown_clan_reads_empty():
    clans = ClanSystem()
    assert clans.get_clan_member_names("nope") == []
    assert clans.get_clan_member_count("nope") == 0
    assert clans.get_clan_count() == 0
    assert clans.get_largest_clan_id() is None


def test_member_counts_follow_adds():
    clans = ClanSystem()
    calls = [("red", "A"), ("blue", "B"), ("red", "C"), ("red", "A"), ("green", "D")]
    for clan_id, name in calls:
        clans.add_crab_name(clan_id, name)

    assert clans.get_clan_member_count("red") == 3
    assert clans.get_clan_member_count("blue") == 1
    assert clans.get_clan_member_count("green") == 1
    assert clans.get_clan_count() == 3
    # Duplicates are kept, order preserved
    assert clans.get_clan_member_names("red") == ["A", "C", "A"]


def test_member_names_is_a_copy():
    clans = ClanSystem()
    clans.add_crab_name("red", "A")

    names = clans.get_clan_member_names("red")
    names.append("Intruder")

    assert clans.get_clan_member_names("red") == ["A"]


def test_largest_clan():
    clans = ClanSystem()
    clans.add_crab_name("small", "A")
    clans.add_crab_name("big", "B")
    clans.add_crab_name("big", "C")

    assert clans.get_largest_clan_id() == "big"


def test_largest_clan_tie_breaks_on_smallest_id():
    clans = ClanSystem()
    for clan_id in ("zeta", "alpha", "mu"):
        clans.add_crab_name(clan_id, "x")
        clans.add_crab_name(clan_id, "y")

    assert clans.get_largest_clan_id() == "alpha"


def test_clan_ids_and_membership_audit():
    clans = ClanSystem()
    clans.add_crab_name("red", "A")
    clans.add_crab_name("blue", "A")
    clans.add_crab_name("blue", "B")

    assert clans.get_clan_ids() == ["blue", "red"]
    assert clans.find_clans_of("A") == ["blue", "red"]
    assert clans.find_clans_of("B") == ["blue"]
    assert clans.find_clans_of("C") == []
