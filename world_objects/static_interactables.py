# static_interactables.py - Placed objects (grabbers, pots, machines, forage)
"""
Classes for objects placed on a location's tile grid.

ARCHITECTURE OVERVIEW
=====================

Base Classes:
    PlacedObject: Base class for everything in Location.objects (identity,
                  stack, quality, role tag)
    Container: Bounded slot inventory owned by a grabber

Placed objects:
    Grabber: Collector object, owns exactly one Container
    IndoorPot: Garden pot holding its own HoeDirt
    MushroomBox: Cave machine that periodically holds a produced item

Roles:
    Whether an object collects harvests is an explicit ObjectRole tag, never
    a name match. Anything with role COLLECTOR is treated as a grabber by the
    collection passes, wherever it is placed.


ADDING A NEW MACHINE TYPE
=========================

1. Subclass PlacedObject, set big_craftable=True and a fixed item_id
   (add the id to constants.py next to MUSHROOM_BOX).
2. Store its output in held_object (an ItemStack or None).
3. Add a resolver in harvest_resolvers.py that moves held_object into a
   container and clears it only after the container accepted the stack.
"""

import copy
from enum import Enum

from constants import (
    GRABBER_CAPACITY, MAX_STACK_SIZE, QUALITY_BASIC, ITEMS, FORAGE_CATEGORIES,
    CATEGORY_BIG_CRAFTABLE, AUTO_GRABBER, MUSHROOM_BOX,
)
from .item_stacks import ItemStack


class ObjectRole(Enum):
    """What a placed object does for the harvest engine."""
    NONE = "none"
    COLLECTOR = "collector"


class PlacedObject:
    """Base class for all objects placed on a tile."""

    def __init__(self, item_id, name=None, stack=1, quality=QUALITY_BASIC,
                 category=None, big_craftable=False, role=ObjectRole.NONE):
        """
        Args:
            item_id: Item identity (object id, or big craftable id if big_craftable)
            name: Display name; defaults to the ITEMS registry name
            stack: How many items this object represents when picked up
            quality: Quality tier of the item
            category: Item category; defaults to the ITEMS registry category
            big_craftable: True for furniture-class objects (machines, grabbers)
            role: ObjectRole tag
        """
        info = ITEMS.get(item_id, {}) if not big_craftable else {}
        self.item_id = item_id
        self.name = name if name is not None else info.get("name", f"Object {item_id}")
        self.stack = stack
        self.quality = quality
        if category is None:
            category = CATEGORY_BIG_CRAFTABLE if big_craftable else info.get("category", 0)
        self.category = category
        self.big_craftable = big_craftable
        self.role = role
        self.held_object = None  # ItemStack held by machines

    @property
    def is_collector(self):
        return self.role is ObjectRole.COLLECTOR

    def is_forage(self):
        """Check if the world treats this object as forage (by category)."""
        if self.big_craftable:
            return False
        return self.category in FORAGE_CATEGORIES

    def to_stack(self):
        """ItemStack equivalent of picking this object up."""
        return ItemStack(
            item_id=self.item_id,
            name=self.name,
            stack=max(1, self.stack),
            quality=self.quality,
            category=self.category,
        )

    def __repr__(self):
        return f"<{self.__class__.__name__} '{self.name}' x{self.stack}>"


class Container:
    """
    Bounded slot inventory.

    Slots hold ItemStack or None. At most `capacity` slots are ever occupied.
    """

    def __init__(self, capacity=GRABBER_CAPACITY, max_stack=MAX_STACK_SIZE):
        self.capacity = capacity
        self.max_stack = max_stack
        self.inventory = [None] * capacity

    # =========================================================================
    # QUERIES
    # =========================================================================

    def occupied_count(self):
        """Number of non-empty slots."""
        return sum(1 for slot in self.inventory if slot is not None)

    def is_full(self):
        return self.occupied_count() >= self.capacity

    def has_contents(self):
        return self.occupied_count() > 0

    def get_item(self, item_id, quality=None):
        """Get total amount of an item in this container, optionally of one quality."""
        total = 0
        for slot in self.inventory:
            if slot and slot.item_id == item_id and (quality is None or slot.quality == quality):
                total += slot.stack
        return total

    @property
    def items(self):
        """Occupied slots, in slot order."""
        return [slot for slot in self.inventory if slot is not None]

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add_item(self, item):
        """Add an ItemStack.

        Fills existing compatible stacks first, then the first empty slots.
        The caller's stack is never modified.

        Returns:
            None if everything was placed, otherwise a copy of the stack
            holding the amount that did not fit (the full amount if nothing did)
        """
        remaining = item.stack
        if remaining <= 0:
            return None

        # First, fill existing stacks
        for slot in self.inventory:
            if slot and slot.can_stack_with(item) and slot.stack < self.max_stack:
                to_add = min(remaining, self.max_stack - slot.stack)
                slot.stack += to_add
                remaining -= to_add
                if remaining <= 0:
                    return None

        # Then, use empty slots
        for i, slot in enumerate(self.inventory):
            if slot is None:
                to_add = min(remaining, self.max_stack)
                self.inventory[i] = item.with_stack(to_add)
                remaining -= to_add
                if remaining <= 0:
                    return None

        return item.with_stack(remaining)

    def can_fit(self, items):
        """Check whether every stack in `items` would be placed in full."""
        trial = Container(self.capacity, self.max_stack)
        trial.inventory = copy.deepcopy(self.inventory)
        for item in items:
            if trial.add_item(item) is not None:
                return False
        return True

    def __repr__(self):
        return f"<Container {self.occupied_count()}/{self.capacity}>"


class Grabber(PlacedObject):
    """
    Auto-grabber: a collector that accumulates harvested items.

    The container is created with the grabber and lives exactly as long as it.
    """

    def __init__(self, name="Auto-Grabber", capacity=GRABBER_CAPACITY):
        super().__init__(AUTO_GRABBER, name=name, big_craftable=True, role=ObjectRole.COLLECTOR)
        self.container = Container(capacity)
        self.show_next_index = False  # Sprite shows visible contents

    def refresh_sprite(self):
        """Flag visible contents if the container holds anything."""
        if self.container.has_contents():
            self.show_next_index = True


class IndoorPot(PlacedObject):
    """Garden pot; its soil behaves like a one-tile field."""

    def __init__(self, hoe_dirt, name="Garden Pot"):
        super().__init__(62, name=name, big_craftable=True)
        self.hoe_dirt = hoe_dirt


class MushroomBox(PlacedObject):
    """Farm cave mushroom box. held_object is the mushroom waiting to be picked."""

    def __init__(self, held_object=None, name="Mushroom Box"):
        super().__init__(MUSHROOM_BOX, name=name, big_craftable=True)
        self.held_object = held_object
