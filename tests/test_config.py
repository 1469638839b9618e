"""
Tests for loading, saving and exposing the grabber config.
"""

import json

from game_logic import GameLogic
from main import print_config
from mod_config import GrabberConfig, GrabberAPI, load_config, save_config
from conftest import ScriptedRandom, make_state, place_grabber


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "missing.json")
    assert config == GrabberConfig()
    assert config.grabber_range == 10
    assert config.global_forage_map == "Farm"


def test_round_trip(tmp_path):
    path = tmp_path / "config.json"
    config = GrabberConfig(do_harvest_flowers=False, grabber_range=3, global_forage_map="Forest")
    assert save_config(config, path)
    assert load_config(path) == config


def test_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(path) == GrabberConfig()


def test_non_object_json_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_config(path) == GrabberConfig()


def test_unknown_keys_ignored_and_missing_keys_defaulted(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"grabber_range": 4, "legacy_option": True}), encoding="utf-8")
    config = load_config(path)
    assert config.grabber_range == 4
    assert config.do_harvest_crops is True


def test_save_to_unwritable_path(tmp_path):
    assert not save_config(GrabberConfig(), tmp_path / "no_such_dir" / "config.json")


def test_api_is_a_read_only_view():
    config = GrabberConfig(grabber_range=7, global_forage_map="Beach",
                           global_forage_tile_x=1, global_forage_tile_y=2)
    api = GrabberAPI(config)
    assert api.grabber_range == 7
    assert api.global_forage_location == ("Beach", 1, 2)
    snapshot = api.get_config()
    snapshot["grabber_range"] = 99
    assert config.grabber_range == 7


def test_mistyped_values_keep_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "grabber_range": "2",
        "global_forage_map": 5,
        "global_forage_tile_x": True,
        "do_harvest_crops": "no",
        "global_forage_tile_y": 3,
    }), encoding="utf-8")
    config = load_config(path)
    assert config.grabber_range == 10
    assert config.global_forage_map == "Farm"
    assert config.global_forage_tile_x == 64
    assert config.do_harvest_crops is True
    assert config.global_forage_tile_y == 3


def test_day_start_runs_with_mistyped_range(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"grabber_range": "2"}), encoding="utf-8")
    state = make_state()
    place_grabber(state.farm, 64, 15)
    reports = GameLogic(state, load_config(path)).on_day_started(ScriptedRandom())
    assert [report.name for report in reports] == ["buildings", "crops", "world"]
    assert not any(report.aborted for report in reports)


def test_non_string_forage_map_aborts_world_pass(state):
    config = GrabberConfig(global_forage_map=5)
    reports = GameLogic(state, config).on_day_started(ScriptedRandom())
    world = reports[-1]
    assert world.aborted
    assert world.reason == "Invalid GlobalForageMap '5'"
    assert state.action_log[-1].endswith("Invalid GlobalForageMap '5'")


def test_print_config_reads_through_api(capsys):
    config = GrabberConfig(grabber_range=3, global_forage_map="Forest",
                           global_forage_tile_x=4, global_forage_tile_y=5)
    print_config(GameLogic(make_state(), config).get_api())
    out = capsys.readouterr().out
    assert "Global grabber: Forest <4, 5>, range 3" in out
    assert "do_harvest_flowers" in out
