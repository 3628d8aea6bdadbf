"""Pytest configuration and shared fixtures."""
import pytest

from helpers import ConstantRandom, TACKLE, THUNDERSHOCK, WATER_GUN, make_profile


@pytest.fixture
def constant_rng():
    return ConstantRandom(0.5)


@pytest.fixture
def pikachu():
    return make_profile(
        "pikachu",
        types=("electric",),
        moves=[THUNDERSHOCK, TACKLE],
        hp=35, attack=55, defense=40, special_attack=50, special_defense=50, speed=90,
    )


@pytest.fixture
def squirtle():
    return make_profile(
        "squirtle",
        types=("water",),
        moves=[TACKLE, WATER_GUN],
        hp=44, attack=48, defense=65, special_attack=50, special_defense=64, speed=43,
    )
