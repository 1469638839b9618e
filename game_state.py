# game_state.py - Pure data model for the harvest world (no harvest rules)
"""
This module contains the GameState class which holds ALL mutable world state.
It is a data container with pure query methods - no harvest rules.

Query methods here are pure lookups (get_location_by_name, iter_locations).
Harvest rules live in harvest_resolvers.py and harvest_system.py; the event
entry points live in game_logic.py.
"""

import logging

from constants import (
    SEASONS, DAYS_PER_SEASON, FARM_LOCATION, ACTION_LOG_LIMIT, LOGGER_NAME,
    FORAGE_CROP_SPRING_ONION, SLIME_BALL, SLIME_BALL_NAME,
)
from scenario_world import (
    UNIQUE_ID, START_SEASON, START_DAY_OF_MONTH, START_YEAR,
    LOCATIONS, GRABBERS, CROP_DEFS, CROPS, POTS, FRUIT_TREES, BUSHES, SPRING_ONIONS,
    FORAGE, MUSHROOM_BOXES, BUILDINGS,
)
from scenario_characters import PLAYER_NAME
from character import create_actor
from world_objects import (
    Location, Building, Grabber, IndoorPot, MushroomBox, PlacedObject,
    Crop, HoeDirt, FruitTree, Bush, ItemStack,
)

logger = logging.getLogger(LOGGER_NAME)


class GameState:
    """
    Data container for all world state with pure query methods.

    This class:
    - Holds all mutable world data (locations, calendar, actor, log)
    - Provides pure query methods (location lookup, enumeration)
    - Provides simple modification methods (log_action, advance_day)
    - Does NOT contain harvest rules (that's in harvest_resolvers.py)
    """

    def __init__(self, load_scenario=True, player=None, unique_id=UNIQUE_ID):
        """
        Args:
            load_scenario: Build the world from scenario_world.py; False starts empty
            player: Actor to use; defaults to the scenario player template
            unique_id: World instance id
        """
        # Calendar
        self.unique_id = unique_id
        self.days_played = 1
        self.year = START_YEAR
        self.season = START_SEASON
        self.day_of_month = START_DAY_OF_MONTH
        self.is_world_ready = True

        # World data
        self.locations = {}  # name -> Location, in visiting order

        # Actor
        self.player = player if player is not None else create_actor(PLAYER_NAME)

        # Action log
        self.action_log = []
        self.log_total_count = 0  # Total entries ever added

        if load_scenario:
            self._init_locations()
            self._init_grabbers()
            self._init_crops()
            self._init_fruit_trees()
            self._init_bushes()
            self._init_spring_onions()
            self._init_forage()
            self._init_mushroom_boxes()
            self._init_buildings()

    # =========================================================================
    # SCENARIO LOADING
    # =========================================================================

    def _init_locations(self):
        """Initialize locations from LOCATIONS configuration."""
        for loc_def in LOCATIONS:
            self.add_location(Location(loc_def["name"], is_farm_cave=loc_def.get("is_farm_cave", False)))

    def _init_grabbers(self):
        for grabber_def in GRABBERS:
            x, y = grabber_def["position"]
            self.locations[grabber_def["location"]].add_object(x, y, Grabber())

    @staticmethod
    def _make_crop(crop_def, ready):
        kwargs = dict(CROP_DEFS[crop_def["crop"]])
        if kwargs.get("tint_color") is not None:
            kwargs["tint_color"] = tuple(kwargs["tint_color"])
        crop = Crop(**kwargs)
        if ready:
            crop.current_phase = crop.last_phase
        return crop

    def _init_crops(self):
        """Initialize planted crops and garden pots."""
        for crop_def in CROPS:
            x, y = crop_def["position"]
            dirt = HoeDirt(self._make_crop(crop_def, crop_def.get("ready", False)),
                           fertilizer=crop_def.get("fertilizer", 0))
            self.locations[crop_def["location"]].add_feature(x, y, dirt)
        for pot_def in POTS:
            x, y = pot_def["position"]
            dirt = HoeDirt(self._make_crop(pot_def, pot_def.get("ready", False)),
                           fertilizer=pot_def.get("fertilizer", 0))
            self.locations[pot_def["location"]].add_object(x, y, IndoorPot(dirt))

    def _init_fruit_trees(self):
        for tree_def in FRUIT_TREES:
            x, y = tree_def["position"]
            tree = FruitTree(
                tree_def["fruit"],
                growth_stage=tree_def.get("growth_stage", 4),
                fruits_on_tree=tree_def.get("fruits_on_tree", 0),
                days_until_mature=tree_def.get("days_until_mature", 0),
                struck_by_lightning_countdown=tree_def.get("struck_by_lightning_countdown", 0),
            )
            self.locations[tree_def["location"]].add_feature(x, y, tree)

    def _init_bushes(self):
        for bush_def in BUSHES:
            x, y = bush_def["position"]
            bush = Bush(size=bush_def.get("size", 1), tile_sheet_offset=bush_def.get("tile_sheet_offset", 0))
            self.locations[bush_def["location"]].add_feature(x, y, bush)

    def _init_spring_onions(self):
        for onion_def in SPRING_ONIONS:
            x, y = onion_def["position"]
            crop = Crop(0, [99999], forage_crop=True, which_forage_crop=FORAGE_CROP_SPRING_ONION)
            self.locations[onion_def["location"]].add_feature(x, y, HoeDirt(crop))

    def _init_forage(self):
        for forage_def in FORAGE:
            x, y = forage_def["position"]
            self.locations[forage_def["location"]].add_object(x, y, PlacedObject(forage_def["item_id"]))

    def _init_mushroom_boxes(self):
        for box_def in MUSHROOM_BOXES:
            x, y = box_def["position"]
            held = ItemStack.create(box_def["held"]) if box_def.get("held") else None
            self.locations[box_def["location"]].add_object(x, y, MushroomBox(held))

    def _init_buildings(self):
        """Initialize farm buildings and their interiors."""
        farm = self.farm
        for building_def in BUILDINGS:
            x, y = building_def["position"]
            indoors = Location(f"{building_def['type']} ({x}, {y})")
            if building_def.get("grabber"):
                gx, gy = building_def["grabber"]
                indoors.add_object(gx, gy, Grabber())
            for item_def in building_def.get("items", []):
                ix, iy = item_def["position"]
                indoors.add_object(ix, iy, PlacedObject(item_def["item_id"]))
            for sx, sy in building_def.get("slime_balls", []):
                indoors.add_object(sx, sy, PlacedObject(SLIME_BALL, name=SLIME_BALL_NAME, big_craftable=True))
            farm.add_building(Building(building_def["type"], x, y, indoors))

    # =========================================================================
    # QUERY METHODS (pure data access, no side effects)
    # =========================================================================

    def add_location(self, location):
        self.locations[location.name] = location
        return location

    def iter_locations(self):
        """All world locations in visiting order (building interiors excluded)."""
        return list(self.locations.values())

    def get_location_by_name(self, name):
        """Get a location by name, ignoring case. None if there is no such location."""
        if not isinstance(name, str) or not name:
            return None
        location = self.locations.get(name)
        if location is not None:
            return location
        lowered = name.lower()
        for loc_name, loc in self.locations.items():
            if loc_name.lower() == lowered:
                return loc
        return None

    @property
    def farm(self):
        return self.get_location_by_name(FARM_LOCATION)

    # =========================================================================
    # CALENDAR
    # =========================================================================

    def advance_day(self):
        """Move the calendar forward one day and grow every terrain feature."""
        self.days_played += 1
        self.day_of_month += 1
        if self.day_of_month > DAYS_PER_SEASON:
            self.day_of_month = 1
            season_index = (SEASONS.index(self.season) + 1) % len(SEASONS)
            if season_index == 0:
                self.year += 1
            self.season = SEASONS[season_index]
        for location in self.locations.values():
            location.day_update(self.season, self.day_of_month)

    # =========================================================================
    # LOGGING
    # =========================================================================

    def log_action(self, message, level=logging.DEBUG):
        """Add a message to the action log and forward it to the grabber logger."""
        log_entry = f"[Y{self.year} {self.season} D{self.day_of_month}] {message}"
        self.action_log.append(log_entry)
        logger.log(level, message)

        self.log_total_count += 1

        # Keep only the last entries
        if len(self.action_log) > ACTION_LOG_LIMIT:
            self.action_log = self.action_log[-ACTION_LOG_LIMIT:]
