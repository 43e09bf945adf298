"""
Tests for Crab, Color and Diet value types.
"""

import dataclasses

import pytest

from ocean.color import Color
from ocean.crab import Crab
from ocean.diet import Diet


def test_crab_fields_and_dict():
    crab = Crab(name="Ferris", speed=4, color=Color(10, 20, 30), diet=Diet.GARBAGE)

    assert crab.to_dict() == {
        'name': 'Ferris',
        'speed': 4,
        'color': {'r': 10, 'g': 20, 'b': 30},
        'diet': 'garbage',
    }


def test_crab_is_immutable():
    crab = Crab(name="Ferris", speed=4, color=Color.red(), diet=Diet.PLANTS)
    with pytest.raises(dataclasses.FrozenInstanceError):
        crab.speed = 99


@pytest.mark.parametrize("speed", [-1, 1.5, "3", True])
def test_crab_rejects_bad_speed(speed):
    with pytest.raises(ValueError):
        Crab(name="Bad", speed=speed, color=Color.red(), diet=Diet.PLANTS)


def test_crab_zero_speed_allowed():
    assert Crab(name="Still", speed=0, color=Color.red(), diet=Diet.PLANTS).speed == 0


def test_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)


def test_color_cross_wraps():
    assert Color.cross(Color.red(), Color.blue()) == Color(255, 0, 255)
    assert Color.cross(Color(200, 100, 0), Color(100, 100, 0)) == Color(44, 200, 0)


def test_color_random_is_seeded():
    assert Color.random(7) == Color.random(7)
    c = Color.random(7)
    assert all(0 <= v <= 255 for v in (c.r, c.g, c.b))


def test_random_diet_seeded_and_covers_all():
    assert Diet.random_diet(11) is Diet.random_diet(11)

    seen = {Diet.random_diet(seed) for seed in range(200)}
    assert seen == set(Diet)


def test_random_diet_unseeded():
    assert isinstance(Diet.random_diet(), Diet)
