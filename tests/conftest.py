"""
Shared fixtures for the harvest engine tests.

World builders create small hand-placed worlds; ScriptedRandom pins every
draw so quality and count rolls are exact.
"""

import pytest

from character import Actor
from game_logic import GameLogic
from game_state import GameState
from mod_config import GrabberConfig
from world_objects import Location, Grabber


class ScriptedRandom:
    """
    Stream with scripted draws.

    next_double() returns the scripted doubles in order, then `default`.
    next_int(lo, hi) returns the scripted ints in order, then lo.
    Every next_int call is recorded in int_calls.
    """

    def __init__(self, doubles=(), ints=(), default=0.99):
        self.doubles = list(doubles)
        self.ints = list(ints)
        self.default = default
        self.double_calls = 0
        self.int_calls = []

    def next_double(self):
        self.double_calls += 1
        if self.doubles:
            return self.doubles.pop(0)
        return self.default

    def next_int(self, lo, hi):
        self.int_calls.append((lo, hi))
        if self.ints:
            return self.ints.pop(0)
        return lo


class NoDrawRandom:
    """Stream that fails the test if anything draws from it."""

    def next_double(self):
        raise AssertionError("unexpected next_double() draw")

    def next_int(self, lo, hi):
        raise AssertionError("unexpected next_int() draw")


def make_actor(farming=0, foraging=0, professions=(), luck_level=0, daily_luck=0.0,
               location_name="Farm", tile=(0, 0)):
    return Actor(
        "Tester",
        skills={"farming": farming, "foraging": foraging},
        professions=professions,
        luck_level=luck_level,
        daily_luck=daily_luck,
        location_name=location_name,
        tile=tile,
    )


def make_state(*location_names, actor=None, season="spring", day_of_month=15):
    """Empty world with the named locations (Farm if none are given)."""
    state = GameState(load_scenario=False, player=actor or make_actor())
    state.season = season
    state.day_of_month = day_of_month
    for name in location_names or ("Farm",):
        state.add_location(Location(name, is_farm_cave=(name == "FarmCave")))
    return state


def place_grabber(location, x=0, y=0, capacity=36):
    return location.add_object(x, y, Grabber(capacity=capacity))


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def actor():
    return make_actor()


@pytest.fixture
def state(actor):
    return make_state("Farm", "Forest", actor=actor)


@pytest.fixture
def config():
    return GrabberConfig(global_forage_map="Farm", global_forage_tile_x=0, global_forage_tile_y=0)


@pytest.fixture
def logic(state, config):
    return GameLogic(state, config)
