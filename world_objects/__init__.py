# world_objects - Physical objects and spaces in the harvest world
"""
This module contains classes representing physical things in the world:
- static_interactables: Placed objects (grabbers, pots, mushroom boxes) and containers
- terrain_features: Soil and crops, fruit trees, bushes
- locations: Named maps keyed by tile
- interiors: Farm buildings and their interiors
- item_stacks: Item stacks moved into grabbers

These are purely representational - they describe what exists in the world,
not the rules for harvesting it (that's in harvest_resolvers.py).
"""

from .item_stacks import ItemStack

from .static_interactables import (
    ObjectRole,
    PlacedObject,
    Container,
    Grabber,
    IndoorPot,
    MushroomBox,
)

from .terrain_features import (
    FeatureKind,
    Crop,
    HoeDirt,
    FruitTree,
    Bush,
)

from .locations import (
    Location,
    Tile,
    tile_key,
)

from .interiors import Building

__all__ = [
    # item_stacks
    'ItemStack',
    # static_interactables
    'ObjectRole',
    'PlacedObject',
    'Container',
    'Grabber',
    'IndoorPot',
    'MushroomBox',
    # terrain_features
    'FeatureKind',
    'Crop',
    'HoeDirt',
    'FruitTree',
    'Bush',
    # locations
    'Location',
    'Tile',
    'tile_key',
    # interiors
    'Building',
]
