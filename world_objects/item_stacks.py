# item_stacks.py - Item stacks moved between the world and grabbers
"""
An ItemStack is one pile of identical items: same identity, same quality,
same tint. Harvest resolvers produce them; containers hold them.

Stacks are plain value objects. Splitting and merging always happens on
copies or through Container, never by sharing one stack between two owners.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from constants import ITEMS, QUALITY_BASIC, QUALITY_NAMES


@dataclass
class ItemStack:
    """A stack of identical items."""
    item_id: int
    name: str
    stack: int = 1
    quality: int = QUALITY_BASIC
    category: int = 0
    color: Optional[Tuple[int, int, int]] = None  # Tint for flowers, None otherwise

    @classmethod
    def create(cls, item_id: int, stack: int = 1, quality: int = QUALITY_BASIC,
               color: Optional[Tuple[int, int, int]] = None) -> 'ItemStack':
        """Create a stack of a registered item, filling name and category from ITEMS."""
        info = ITEMS.get(item_id, {})
        return cls(
            item_id=item_id,
            name=info.get("name", f"Item {item_id}"),
            stack=stack,
            quality=quality,
            category=info.get("category", 0),
            color=color,
        )

    def can_stack_with(self, other: 'ItemStack') -> bool:
        """Check if two stacks can share a slot."""
        return (self.item_id == other.item_id
                and self.name == other.name
                and self.quality == other.quality
                and self.color == other.color)

    def with_stack(self, amount: int) -> 'ItemStack':
        """Copy of this stack holding a different amount."""
        return replace(self, stack=amount)

    @property
    def price(self) -> int:
        return ITEMS.get(self.item_id, {}).get("price", 0)

    def describe(self) -> str:
        """Short log form, e.g. '3xgold'."""
        return f"{self.stack}x{QUALITY_NAMES.get(self.quality, self.quality)}"
