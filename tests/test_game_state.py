"""
Tests for GameState: scenario loading, lookups, calendar and the action log.
"""

import logging

from constants import ACTION_LOG_LIMIT
from game_state import GameState
from world_objects import Bush, Crop, HoeDirt, FruitTree
from conftest import make_state


class TestScenario:

    def test_demo_world_loads(self):
        state = GameState()
        assert [loc.name for loc in state.iter_locations()] == ["Farm", "Forest", "Beach", "FarmCave"]
        assert state.farm.get_object_at(64, 15).is_collector
        assert state.get_location_by_name("FarmCave").is_farm_cave
        assert len(state.farm.buildings) == 3
        assert state.player.name == "Farmer"

    def test_empty_world(self):
        state = GameState(load_scenario=False)
        assert state.iter_locations() == []
        assert state.farm is None


class TestLookups:

    def test_location_lookup_ignores_case(self):
        state = make_state("Farm", "Forest")
        assert state.get_location_by_name("forest") is state.locations["Forest"]
        assert state.get_location_by_name("Nowhere") is None
        assert state.get_location_by_name("") is None
        assert state.get_location_by_name(5) is None
        assert state.get_location_by_name(None) is None


class TestCalendar:

    def test_season_rolls_over(self):
        state = make_state(season="spring", day_of_month=28)
        state.advance_day()
        assert (state.season, state.day_of_month, state.days_played) == ("summer", 1, 2)

    def test_year_rolls_over(self):
        state = make_state(season="winter", day_of_month=28)
        state.advance_day()
        assert (state.season, state.year) == ("spring", 2)

    def test_features_grow(self):
        state = make_state(season="spring", day_of_month=14)
        crop = Crop(24, [1, 99999])
        state.farm.add_feature(1, 1, HoeDirt(crop))
        tree = state.farm.add_feature(2, 2, FruitTree(613, growth_stage=4, fruits_on_tree=2))
        bush = state.farm.add_feature(3, 3, Bush())
        state.advance_day()
        assert crop.is_ready()
        assert tree.fruits_on_tree == 3
        assert bush.has_berries()

    def test_regrowth_countdown(self):
        state = make_state()
        crop = Crop(188, [1, 99999], regrow_after_harvest=2)
        crop.current_phase = crop.last_phase
        crop.fully_grown = True
        crop.day_of_current_phase = 2
        state.farm.add_feature(1, 1, HoeDirt(crop))
        state.advance_day()
        assert not crop.is_ready()
        state.advance_day()
        assert crop.is_ready()


class TestActionLog:

    def test_entries_are_stamped(self):
        state = make_state(season="fall", day_of_month=9)
        state.log_action("hello")
        assert state.action_log[-1] == "[Y1 fall D9] hello"

    def test_log_is_bounded(self):
        state = make_state()
        for i in range(ACTION_LOG_LIMIT + 5):
            state.log_action(f"entry {i}")
        assert len(state.action_log) == ACTION_LOG_LIMIT
        assert state.log_total_count == ACTION_LOG_LIMIT + 5
        assert state.action_log[-1].endswith(f"entry {ACTION_LOG_LIMIT + 4}")

    def test_forwards_to_logger(self, caplog):
        state = make_state()
        with caplog.at_level(logging.DEBUG, logger="grabber"):
            state.log_action("quiet")
            state.log_action("loud", logging.INFO)
        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.DEBUG, "quiet"), (logging.INFO, "loud"),
        ]
