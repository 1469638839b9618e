# terrain_features.py - Growable things attached to a tile (soil, fruit trees, bushes)
"""
Terrain features are the long-lived entities of a location's terrain map.

Every feature carries a `kind` tag (FeatureKind). Harvest dispatch looks the
kind up in a table instead of testing classes one after another.

Growth state machines:
- Crop: phase index walks through phase_days; the last phase is "ready".
  Regrowing crops stay in the last phase and count day_of_current_phase
  down to 0 between harvests.
- FruitTree: days_until_mature counts down to 0 (mature) and keeps going
  negative; older trees give better fruit.
- Bush: berries appear (tile_sheet_offset == 1) on bloom days.
"""

from enum import Enum

from constants import (
    SEASONS, NO_REGROWTH, HARVEST_METHOD_HAND, FRUIT_TREE_MATURE_STAGE, FRUIT_TREE_MAX_FRUIT,
    BUSH_MEDIUM, BUSH_BLOOM, FERTILIZER_BOOSTS,
)


class FeatureKind(Enum):
    """Dispatch tag for terrain features."""
    HOE_DIRT = "hoe_dirt"
    FRUIT_TREE = "fruit_tree"
    BUSH = "bush"


class Crop:
    """A crop growing in hoe dirt."""

    def __init__(self, index_of_harvest, phase_days, current_phase=0, day_of_current_phase=0,
                 fully_grown=False, min_harvest=1, max_harvest=1,
                 max_harvest_increase_per_farming_level=0, chance_for_extra_crops=0.0,
                 regrow_after_harvest=NO_REGROWTH, harvest_method=HARVEST_METHOD_HAND,
                 program_colored=False, tint_color=None, dead=False,
                 forage_crop=False, which_forage_crop=0):
        """
        Args:
            index_of_harvest: Item id produced (0 = produces nothing)
            phase_days: Days spent in each phase; the last entry is the ready phase
            current_phase: Index into phase_days
            day_of_current_phase: Days spent in current phase, or regrowth days left
            fully_grown: True once a regrowing crop has been harvested at least once
            min_harvest, max_harvest: Base harvest count range
            max_harvest_increase_per_farming_level: Farming levels per +1 max harvest
            chance_for_extra_crops: Per-draw chance of +1 item
            regrow_after_harvest: Days to regrow, or NO_REGROWTH
            harvest_method: HARVEST_METHOD_HAND or HARVEST_METHOD_SCYTHE
            program_colored: True for flowers (harvest keeps tint_color)
            dead: Withered crop
            forage_crop: Wild crop (spring onion) - not a row crop
            which_forage_crop: Forage crop sub-kind
        """
        self.index_of_harvest = index_of_harvest
        self.phase_days = list(phase_days)
        self.current_phase = current_phase
        self.day_of_current_phase = day_of_current_phase
        self.fully_grown = fully_grown
        self.min_harvest = min_harvest
        self.max_harvest = max_harvest
        self.max_harvest_increase_per_farming_level = max_harvest_increase_per_farming_level
        self.chance_for_extra_crops = chance_for_extra_crops
        self.regrow_after_harvest = regrow_after_harvest
        self.harvest_method = harvest_method
        self.program_colored = program_colored
        self.tint_color = tint_color
        self.dead = dead
        self.forage_crop = forage_crop
        self.which_forage_crop = which_forage_crop

    @property
    def last_phase(self):
        return len(self.phase_days) - 1

    @property
    def regrows(self):
        return self.regrow_after_harvest != NO_REGROWTH

    def is_ready(self):
        """Ready this tick: in the last phase, and either never harvested or regrown."""
        return (self.current_phase >= self.last_phase
                and (not self.fully_grown or self.day_of_current_phase <= 0))

    def day_update(self):
        """Advance growth by one day."""
        if self.dead:
            return
        if self.fully_grown:
            if self.day_of_current_phase > 0:
                self.day_of_current_phase -= 1
            return
        if self.current_phase >= self.last_phase:
            return
        self.day_of_current_phase += 1
        if self.day_of_current_phase >= self.phase_days[self.current_phase]:
            self.current_phase += 1
            self.day_of_current_phase = 0

    def __repr__(self):
        return f"<Crop {self.index_of_harvest} phase {self.current_phase}/{self.last_phase}>"


class HoeDirt:
    """Tilled soil. Holds at most one crop and an optional fertilizer."""

    kind = FeatureKind.HOE_DIRT

    def __init__(self, crop=None, fertilizer=0):
        self.crop = crop
        self.fertilizer = fertilizer  # Fertilizer item id, 0 for none

    @property
    def fertilizer_boost(self):
        """0 none, 1 basic, 2 quality fertilizer."""
        return FERTILIZER_BOOSTS.get(self.fertilizer, 0)

    def day_update(self, season=None, day_of_month=None):
        if self.crop is not None:
            self.crop.day_update()


class FruitTree:
    """A fruit tree. Fruit count grows daily once mature."""

    kind = FeatureKind.FRUIT_TREE

    def __init__(self, index_of_fruit, growth_stage=0, fruits_on_tree=0,
                 days_until_mature=28, struck_by_lightning_countdown=0):
        self.index_of_fruit = index_of_fruit
        self.growth_stage = growth_stage
        self.fruits_on_tree = fruits_on_tree
        self.days_until_mature = days_until_mature  # Negative once mature
        self.struck_by_lightning_countdown = struck_by_lightning_countdown

    @property
    def is_mature(self):
        return self.growth_stage >= FRUIT_TREE_MATURE_STAGE

    def day_update(self, season=None, day_of_month=None):
        self.days_until_mature -= 1
        if self.struck_by_lightning_countdown > 0:
            self.struck_by_lightning_countdown -= 1
        if not self.is_mature:
            if self.days_until_mature <= 0:
                self.growth_stage = FRUIT_TREE_MATURE_STAGE
            return
        self.fruits_on_tree = min(FRUIT_TREE_MAX_FRUIT, self.fruits_on_tree + 1)

    def __repr__(self):
        return f"<FruitTree {self.index_of_fruit} fruit={self.fruits_on_tree}>"


class Bush:
    """Wild bush; medium bushes carry salmonberries and blackberries."""

    kind = FeatureKind.BUSH

    def __init__(self, size=BUSH_MEDIUM, tile_sheet_offset=0):
        self.size = size
        self.tile_sheet_offset = tile_sheet_offset  # 1 = unharvested berries showing

    def in_bloom(self, season, day_of_month):
        """Berry season: medium bushes on the spring and fall bloom days."""
        if self.size != BUSH_MEDIUM:
            return False
        window = BUSH_BLOOM.get(season)
        if window is None:
            return False
        first_day, last_day, _berry = window
        return first_day <= day_of_month <= last_day

    def has_berries(self):
        return self.tile_sheet_offset == 1

    def day_update(self, season=None, day_of_month=None):
        if season not in SEASONS:
            return
        self.tile_sheet_offset = 1 if self.in_bloom(season, day_of_month) else 0

    def __repr__(self):
        return f"<Bush size={self.size} offset={self.tile_sheet_offset}>"
