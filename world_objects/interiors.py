# interiors.py - Farm buildings and their interior spaces
"""
A Building sits on the farm and owns an interior Location.

Interiors are separate maps: they are not listed among the world's
locations, so only the building pass ever looks inside them.
"""

from constants import COOP_BUILDING_TOKENS


class Building:
    """
    A farm building (coop, slime hutch, barn, ...).

    The interior is created with the building and shares its lifetime.
    """

    def __init__(self, building_type, tile_x, tile_y, indoors=None):
        """
        Args:
            building_type: Type name, e.g. 'Big Coop', 'Slime Hutch'
            tile_x, tile_y: Top-left tile on the farm
            indoors: Interior Location, or None for buildings with no inside
        """
        self.building_type = building_type
        self.tile_x = tile_x
        self.tile_y = tile_y
        self.indoors = indoors

    @property
    def collects_byproducts(self):
        """Check if the building pass should search this building."""
        return any(token in self.building_type for token in COOP_BUILDING_TOKENS)

    def __repr__(self):
        return f"<Building '{self.building_type}' at ({self.tile_x}, {self.tile_y})>"
