# harvest_system.py - Daily collection passes that drive the resolvers
"""
HarvestSystem runs the three collection passes over the world:

    autograb_buildings()  Coop and slime hutch byproducts into the grabber
                          inside the same building
    autograb_crops()      Crops, pots and fruit trees within grabber_range
                          of every grabber in every location
    autograb_world()      Forage, berries, spring onions and mushroom boxes
                          in every location into the one global grabber

A pass never raises. Missing things are skipped with a debug log line, a
full grabber stops the pass (or that grabber's scan), and a misconfigured
global grabber aborts the world pass with exactly one log line.

Each pass returns a PassReport so callers and tests can see what happened
without reading the log.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from constants import BUSH_BLOOM, SPRING_ONION_LOCATION
from harvest_resolvers import (
    HarvestOutcome, TERRAIN_RESOLVERS, RESOLVER_CLASSES,
    CropResolver, BushResolver, ForageResolver, SpringOnionResolver,
    CoopResolver, MushroomBoxResolver,
)
from harvest_rng import unseeded_stream
from world_objects import FeatureKind, IndoorPot


@dataclass
class PassReport:
    """Summary of one collection pass."""
    name: str
    items_added: Counter = field(default_factory=Counter)  # name -> things harvested
    grabbers: int = 0
    aborted: bool = False
    reason: Optional[str] = None

    def abort(self, reason):
        self.aborted = True
        self.reason = reason
        return self


def _plural(count):
    return "" if count == 1 else "s"


class HarvestSystem:
    """
    Runs the collection passes over a GameLogic's world.

    Holds no world state of its own; the resolver instances are stateless.
    """

    def __init__(self, game_logic):
        """
        Args:
            game_logic: GameLogic instance (gives state, config and experience)
        """
        self.game_logic = game_logic
        self.resolvers = {name: cls(game_logic) for name, cls in RESOLVER_CLASSES.items()}
        self.terrain_resolvers = {kind: self.resolvers[cls.name]
                                  for kind, cls in TERRAIN_RESOLVERS.items()}

    @property
    def state(self):
        return self.game_logic.state

    @property
    def config(self):
        return self.game_logic.config

    def _log_summary(self, added, prefix):
        for name, count in added.items():
            self.state.log_action(f"{prefix} {count} {name}{_plural(count)}")

    # =========================================================================
    # BUILDING PASS
    # =========================================================================

    def autograb_buildings(self):
        """Move coop byproducts and slime into the grabber in each building."""
        report = PassReport("buildings")
        farm = self.state.farm
        if farm is None:
            self.state.log_action("No farm location, skipping buildings")
            return report

        resolver = self.resolvers[CoopResolver.name]
        for building in farm.buildings:
            if not building.collects_byproducts:
                continue
            self.state.log_action(f"Searching {building.building_type} at <{building.tile_x},"
                                  f"{building.tile_y}> for auto-grabber")
            indoors = building.indoors
            if indoors is None:
                continue

            grabber = indoors.find_first_collector()
            if grabber is None:
                self.state.log_action("  No grabber found")
                continue
            report.grabbers += 1

            added = Counter()
            for tile, obj in list(indoors.objects.items()):
                if grabber.container.is_full():
                    self.state.log_action("  Grabber is full")
                    break
                if not CoopResolver.is_grabbable(obj):
                    continue
                outcome = resolver.resolve(indoors, tile, obj, grabber.container)
                if outcome.harvested:
                    added[obj.name] += 1

            self._log_summary(added, "  Added")
            report.items_added.update(added)
            grabber.refresh_sprite()
        return report

    # =========================================================================
    # CROP PASS
    # =========================================================================

    @staticmethod
    def _square(center, radius):
        """Tiles of the inclusive square around center, column by column."""
        cx, cy = center
        for x in range(cx - radius, cx + radius + 1):
            for y in range(cy - radius, cy + radius + 1):
                yield (x, y)

    def _harvest_tile(self, location, tile, container):
        """Dispatch one tile: soil first, then a garden pot, then other terrain."""
        feature = location.get_feature_at(*tile)
        if feature is not None and feature.kind is FeatureKind.HOE_DIRT:
            return self.terrain_resolvers[FeatureKind.HOE_DIRT].resolve(location, tile, feature, container)
        obj = location.get_object_at(*tile)
        if isinstance(obj, IndoorPot):
            return self.resolvers[CropResolver.name].resolve(location, tile, obj, container)
        if feature is not None:
            resolver = self.terrain_resolvers.get(feature.kind)
            if resolver is not None:
                return resolver.resolve(location, tile, feature, container)
        return HarvestOutcome()

    def autograb_crops(self):
        """Harvest ready crops and fruit around every grabber."""
        report = PassReport("crops")
        if not self.config.do_harvest_crops:
            return report

        radius = self.config.grabber_range
        for location in self.state.iter_locations():
            for grabber_tile, grabber in location.iter_collectors():
                container = grabber.container
                if container.is_full():
                    continue
                report.grabbers += 1
                for tile in self._square(grabber_tile, radius):
                    if container.is_full():
                        self.state.log_action(f"  Grabber at {location.name} {grabber_tile} is full")
                        break
                    outcome = self._harvest_tile(location, tile, container)
                    if outcome.harvested:
                        report.items_added[outcome.placed[0].name] += 1
                grabber.refresh_sprite()
        return report

    # =========================================================================
    # WORLD PASS
    # =========================================================================

    def find_global_grabber(self):
        """
        The grabber at the configured global forage map and tile.

        Returns:
            (grabber, None) if found, otherwise (None, reason)
        """
        config = self.config
        forager_map = self.state.get_location_by_name(config.global_forage_map)
        if forager_map is None:
            return None, f"Invalid GlobalForageMap '{config.global_forage_map}'"
        grabber = forager_map.get_object_at(config.global_forage_tile_x, config.global_forage_tile_y)
        if grabber is None or not grabber.is_collector:
            return None, (f"No auto-grabber at {config.global_forage_map}: "
                          f"<{config.global_forage_tile_x}, {config.global_forage_tile_y}>")
        return grabber, None

    def _forage_location(self, location, container, rng, added):
        """
        Collect everything the global grabber takes from one location.

        Returns:
            False if the grabber filled up (the pass must stop), True otherwise
        """
        # Collect forage tiles up front; resolvers remove objects as they go
        forage_tiles = [(tile, obj) for tile, obj in list(location.objects.items())
                        if ForageResolver.is_grabbable(obj)]

        if location.name == SPRING_ONION_LOCATION:
            onion_resolver = self.resolvers[SpringOnionResolver.name]
            for tile, dirt in location.features_of_kind(FeatureKind.HOE_DIRT):
                if container.is_full():
                    return False
                outcome = onion_resolver.resolve(location, tile, dirt, container, rng)
                if outcome.harvested:
                    added[outcome.placed[0].name] += 1

        if self.state.season in BUSH_BLOOM:
            bush_resolver = self.resolvers[BushResolver.name]
            for tile, bush in location.features_of_kind(FeatureKind.BUSH):
                if container.is_full():
                    return False
                outcome = bush_resolver.resolve(location, tile, bush, container, rng)
                if outcome.harvested:
                    added[outcome.placed[0].name] += 1

        forage_resolver = self.resolvers[ForageResolver.name]
        for tile, obj in forage_tiles:
            if container.is_full():
                return False
            if location.get_object_at(*tile) is not obj:
                continue
            outcome = forage_resolver.resolve(location, tile, obj, container, rng)
            if outcome.harvested:
                added[obj.name] += 1

        if location.is_farm_cave and self.config.do_harvest_farm_cave:
            box_resolver = self.resolvers[MushroomBoxResolver.name]
            for tile, obj in list(location.objects.items()):
                if container.is_full():
                    return False
                outcome = box_resolver.resolve(location, tile, obj, container, rng)
                if outcome.harvested:
                    added[outcome.placed[0].name] += 1
        return True

    def autograb_world(self, rng=None):
        """
        Sweep every location into the global grabber.

        Args:
            rng: Stream for every forage roll in this pass; a fresh unseeded
                 stream if None
        """
        report = PassReport("world")
        if not self.config.do_global_forage:
            return report

        grabber, reason = self.find_global_grabber()
        if grabber is None:
            self.state.log_action(reason, logging.INFO)
            return report.abort(reason)
        report.grabbers = 1

        if rng is None:
            rng = unseeded_stream()
            self.state.log_action(f"Global forage stream seed {rng.seed}")

        container = grabber.container
        for location in self.state.iter_locations():
            added = Counter()
            finished = self._forage_location(location, container, rng, added)
            self._log_summary(added, f"  {location.name} - found")
            report.items_added.update(added)
            if not finished or container.is_full():
                self.state.log_action("Global grabber full")
                report.abort("Global grabber full")
                break

        grabber.refresh_sprite()
        return report
