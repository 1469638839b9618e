# mod_config.py - Runtime toggles for the grabber, persisted as JSON
"""
GrabberConfig holds everything a player can switch on or off.
Game-balance numbers are not here; they live in constants.py.

load_config() never raises: a missing or unreadable file gives the defaults
and unknown keys are ignored so old config files keep loading. A value of
the wrong type keeps its default.
"""

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Union

from constants import FARM_LOCATION

CONFIG_FILE = Path("config.json")


@dataclass
class GrabberConfig:
    """Player-facing grabber settings."""
    do_harvest_crops: bool = True
    do_harvest_flowers: bool = True
    do_harvest_fruit_trees: bool = True
    do_harvest_truffles: bool = True
    do_harvest_farm_cave: bool = True
    do_global_forage: bool = True
    do_gain_experience: bool = True
    grabber_range: int = 10
    global_forage_map: str = FARM_LOCATION
    global_forage_tile_x: int = 64
    global_forage_tile_y: int = 15

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GrabberConfig':
        """
        Build a config from a dict, keeping defaults for missing keys.

        A value whose type does not match its field keeps the default
        (booleans are not accepted for int fields).
        """
        values = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if not isinstance(value, f.type):
                continue
            if f.type is int and isinstance(value, bool):
                continue
            values[f.name] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Union[str, Path] = CONFIG_FILE) -> GrabberConfig:
    """Load the grabber config, falling back to defaults."""
    path = Path(path)
    if not path.exists():
        return GrabberConfig()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            return GrabberConfig()
        return GrabberConfig.from_dict(data)
    except (json.JSONDecodeError, OSError, TypeError):
        return GrabberConfig()


def save_config(config: GrabberConfig, path: Union[str, Path] = CONFIG_FILE) -> bool:
    """Write the grabber config. Returns False if it could not be written."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config.to_dict(), f, ensure_ascii=False, indent=2)
        return True
    except (OSError, TypeError):
        return False


class GrabberAPI:
    """Read-only view of the grabber config for other components."""

    def __init__(self, config: GrabberConfig):
        self._config = config

    def get_config(self) -> Dict[str, Any]:
        """Copy of the current settings."""
        return self._config.to_dict()

    @property
    def grabber_range(self) -> int:
        return self._config.grabber_range

    @property
    def global_forage_location(self):
        """(map name, tile x, tile y) of the global grabber."""
        return (self._config.global_forage_map,
                self._config.global_forage_tile_x,
                self._config.global_forage_tile_y)
