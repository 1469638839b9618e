# locations.py - A named world region with its object and terrain maps
"""
Location holds everything placed in one map, keyed by exact integer tile.

    objects:           (x, y) -> PlacedObject
    terrain_features:  (x, y) -> HoeDirt | FruitTree | Bush
    buildings:         Building list (farm only; interiors are their own Location)

Removal is key deletion; mutation goes through the map lookup. Nothing else
keeps references to entities between passes.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from .static_interactables import Grabber, PlacedObject

Tile = Tuple[int, int]


def tile_key(x, y) -> Tile:
    """Normalize a coordinate pair to an exact integer tile key."""
    return (int(x), int(y))


class Location:
    """A named map with its objects, terrain features and buildings."""

    def __init__(self, name: str, is_farm_cave: bool = False):
        self.name = name
        self.is_farm_cave = is_farm_cave
        self.objects: Dict[Tile, PlacedObject] = {}
        self.terrain_features: Dict[Tile, object] = {}
        self.buildings: List = []

    # =========================================================================
    # OBJECTS
    # =========================================================================

    def add_object(self, x, y, obj):
        """Place an object, replacing whatever was on the tile."""
        self.objects[tile_key(x, y)] = obj
        return obj

    def get_object_at(self, x, y) -> Optional[PlacedObject]:
        return self.objects.get(tile_key(x, y))

    def remove_object(self, x, y) -> Optional[PlacedObject]:
        """Remove and return the object on a tile, if any."""
        return self.objects.pop(tile_key(x, y), None)

    def iter_collectors(self) -> Iterator[Tuple[Tile, Grabber]]:
        """Yield (tile, grabber) for every collector object, in placement order."""
        for tile, obj in list(self.objects.items()):
            if obj.is_collector:
                yield tile, obj

    def find_first_collector(self) -> Optional[Grabber]:
        for _tile, grabber in self.iter_collectors():
            return grabber
        return None

    # =========================================================================
    # TERRAIN FEATURES
    # =========================================================================

    def add_feature(self, x, y, feature):
        self.terrain_features[tile_key(x, y)] = feature
        return feature

    def get_feature_at(self, x, y):
        return self.terrain_features.get(tile_key(x, y))

    def features_of_kind(self, kind) -> List[Tuple[Tile, object]]:
        """All (tile, feature) pairs with the given FeatureKind."""
        return [(tile, feature) for tile, feature in self.terrain_features.items()
                if feature.kind is kind]

    # =========================================================================
    # BUILDINGS
    # =========================================================================

    def add_building(self, building):
        self.buildings.append(building)
        return building

    def day_update(self, season, day_of_month):
        """Grow every terrain feature (pots included) by one day."""
        for feature in self.terrain_features.values():
            feature.day_update(season, day_of_month)
        for obj in self.objects.values():
            hoe_dirt = getattr(obj, 'hoe_dirt', None)
            if hoe_dirt is not None:
                hoe_dirt.day_update(season, day_of_month)
        for building in self.buildings:
            if building.indoors is not None:
                building.indoors.day_update(season, day_of_month)

    def __repr__(self):
        return f"<Location '{self.name}' objects={len(self.objects)} features={len(self.terrain_features)}>"
