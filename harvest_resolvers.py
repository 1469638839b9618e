# harvest_resolvers.py - Harvest behavior classes with unified resolve() pattern
"""
Each resolver turns one harvestable source into item stacks in a container.

Every resolve() call follows the same order:
1. Return an empty outcome if the container is already full
2. Check the source is eligible (ready crop, fruit on the tree, ...)
3. Roll quality and count from the calculator
4. Commit the stacks to the container (all stacks or none)
5. Only after a successful commit: change or remove the source, award experience

A batch that does not fit leaves the source untouched and comes back with
blocked=True so the pass can try again another day.

Base HarvestResolver handles the commit and logging.
Subclasses override resolve() for their source type.
"""

from dataclasses import dataclass, field
from typing import List

from constants import (
    SKILL_FARMING, SKILL_FORAGING,
    XP_COOP_ITEM, XP_FRUIT, XP_SPRING_ONION, XP_FORAGE,
    FLOWER_HARVEST_IDS, HARVEST_METHOD_SCYTHE, SUNFLOWER, SUNFLOWER_SEEDS,
    FORAGE_CROP_SPRING_ONION, SPRING_ONION, BUSH_BLOOM,
    FORAGE_ITEM_IDS, COOP_ITEM_TOKENS, SLIME_BALL_NAME, SLIME, PETRIFIED_SLIME,
    MUSHROOM_BOX, CROP_SEED_SALT, SLIME_SEED_SALT,
)
from harvest_quality import (
    roll_forage_quality, roll_forage_stack_bonus, berry_count,
    roll_crop_quality, roll_crop_amount, roll_luck_double, roll_sunflower_seed_count,
    crop_experience, fruit_quality, roll_slime_yield,
)
from harvest_rng import seeded_stream, unseeded_stream
from world_objects import ItemStack, FeatureKind


@dataclass
class HarvestOutcome:
    """What one resolve() call did."""
    placed: List[ItemStack] = field(default_factory=list)
    blocked: bool = False  # Eligible, but the stacks did not fit

    @property
    def harvested(self) -> bool:
        return bool(self.placed)


class HarvestResolver:
    """
    Base resolver - owns the commit step shared by every source type.

    Subclasses set `name` and override resolve(location, tile, source, container, rng).
    """

    name = None

    def __init__(self, logic):
        """
        Args:
            logic: GameLogic instance (gives state, config and experience)
        """
        self.logic = logic

    @property
    def state(self):
        return self.logic.state

    @property
    def config(self):
        return self.logic.config

    @property
    def actor(self):
        return self.logic.state.player

    def resolve(self, location, tile, source, container, rng=None):
        raise NotImplementedError

    # =========================================================================
    # SHARED STEPS
    # =========================================================================

    def commit(self, container, stacks, source_name):
        """
        Place every stack or none of them.

        Returns:
            HarvestOutcome with the placed stacks, or blocked=True if the
            batch would not fit in full
        """
        if not container.can_fit(stacks):
            self.state.log_action(f"  {source_name} does not fit in grabber, left in place")
            return HarvestOutcome(blocked=True)
        for stack in stacks:
            container.add_item(stack)
        return HarvestOutcome(placed=list(stacks))

    def award(self, skill_id, amount):
        self.logic.gain_experience(skill_id, amount)


# =============================================================================
# CROPS
# =============================================================================

class CropResolver(HarvestResolver):
    """Ready crops in hoe dirt or in a garden pot."""

    name = "crop"

    def resolve(self, location, tile, source, container, rng=None):
        if container.is_full():
            return HarvestOutcome()

        # Garden pots carry their own soil
        dirt = getattr(source, 'hoe_dirt', source)
        crop = dirt.crop
        if crop is None or crop.dead or crop.forage_crop:
            return HarvestOutcome()
        if not self.config.do_harvest_flowers and crop.index_of_harvest in FLOWER_HARVEST_IDS:
            return HarvestOutcome()
        if not crop.is_ready() or crop.index_of_harvest == 0:
            return HarvestOutcome()

        if rng is None:
            rng = seeded_stream(tile, self.state.days_played, self.state.unique_id, CROP_SEED_SALT)

        actor = self.actor
        harvest_id = crop.index_of_harvest
        quality = roll_crop_quality(actor, dirt.fertilizer_boost, rng)
        amount = roll_crop_amount(crop, actor, rng)

        if crop.harvest_method == HARVEST_METHOD_SCYTHE:
            stacks = [ItemStack.create(harvest_id, amount, quality)]
        else:
            color = crop.tint_color if crop.program_colored else None
            stacks = [ItemStack.create(harvest_id, 1, quality, color=color)]
            if roll_luck_double(actor, rng):
                amount *= 2
            extra_id = harvest_id
            if harvest_id == SUNFLOWER:
                extra_id = SUNFLOWER_SEEDS
                amount = roll_sunflower_seed_count(rng)
            if amount > 1:
                stacks.append(ItemStack.create(extra_id, amount - 1))

        outcome = self.commit(container, stacks, stacks[0].name)
        if outcome.blocked:
            return outcome

        self.state.log_action(f"  Harvested {stacks[0].name} at {tile}: "
                              + ", ".join(s.describe() for s in stacks))
        # Sunflowers earn XP at the flower's price, not the seeds'
        self.award(SKILL_FARMING, crop_experience(stacks[0].price))

        if crop.regrows:
            crop.day_of_current_phase = crop.regrow_after_harvest
            crop.fully_grown = True
        else:
            dirt.crop = None
        return outcome


# =============================================================================
# FRUIT TREES
# =============================================================================

class FruitTreeResolver(HarvestResolver):
    """All fruit on a mature tree, as one stack."""

    name = "fruit_tree"

    def resolve(self, location, tile, source, container, rng=None):
        if container.is_full() or not self.config.do_harvest_fruit_trees:
            return HarvestOutcome()
        if not source.is_mature or source.fruits_on_tree <= 0:
            return HarvestOutcome()

        fruit = ItemStack.create(source.index_of_fruit, source.fruits_on_tree, fruit_quality(source))
        outcome = self.commit(container, [fruit], fruit.name)
        if outcome.blocked:
            return outcome

        self.state.log_action(f"  Picked {fruit.describe()} {fruit.name} at {tile}")
        source.fruits_on_tree = 0
        self.award(SKILL_FORAGING, XP_FRUIT)
        return outcome


# =============================================================================
# WORLD FORAGE
# =============================================================================

class BushResolver(HarvestResolver):
    """Seasonal berries on medium bushes."""

    name = "bush"

    def resolve(self, location, tile, source, container, rng=None):
        if container.is_full():
            return HarvestOutcome()
        season, day = self.state.season, self.state.day_of_month
        bloom = BUSH_BLOOM.get(season)
        if bloom is None:
            return HarvestOutcome()
        if not (source.in_bloom(season, day) and source.has_berries()):
            return HarvestOutcome()

        rng = rng or unseeded_stream()
        berry_id = bloom[2]
        berries = ItemStack.create(berry_id, berry_count(self.actor), roll_forage_quality(self.actor, rng))
        outcome = self.commit(container, [berries], berries.name)
        if outcome.blocked:
            return outcome

        source.tile_sheet_offset = 0
        return outcome


class ForageResolver(HarvestResolver):
    """Forage objects lying on the map (truffles included)."""

    name = "forage"

    @staticmethod
    def is_grabbable(obj):
        """Allow-listed ids or anything the world calls forage; never big craftables."""
        if obj.big_craftable:
            return False
        return obj.item_id in FORAGE_ITEM_IDS or obj.is_forage()

    def resolve(self, location, tile, source, container, rng=None):
        if container.is_full() or not self.is_grabbable(source):
            return HarvestOutcome()

        rng = rng or unseeded_stream()
        quality = roll_forage_quality(self.actor, rng)
        amount = max(1, source.stack) + roll_forage_stack_bonus(self.actor, rng)
        item = source.to_stack().with_stack(amount)
        item.quality = quality

        outcome = self.commit(container, [item], item.name)
        if outcome.blocked:
            return outcome

        self.state.log_action(f"  Grabbing {item.name}: {item.describe()}")
        location.remove_object(*tile)
        self.award(SKILL_FORAGING, XP_FORAGE)
        return outcome


class SpringOnionResolver(HarvestResolver):
    """Wild spring onions growing in forest dirt."""

    name = "spring_onion"

    @staticmethod
    def is_spring_onion(dirt):
        crop = dirt.crop
        return (crop is not None and crop.forage_crop
                and crop.which_forage_crop == FORAGE_CROP_SPRING_ONION)

    def resolve(self, location, tile, source, container, rng=None):
        if container.is_full() or not self.is_spring_onion(source):
            return HarvestOutcome()

        rng = rng or unseeded_stream()
        quality = roll_forage_quality(self.actor, rng)
        amount = 1 + roll_forage_stack_bonus(self.actor, rng)
        onion = ItemStack.create(SPRING_ONION, amount, quality)

        outcome = self.commit(container, [onion], onion.name)
        if outcome.blocked:
            return outcome

        source.crop = None
        self.award(SKILL_FORAGING, XP_SPRING_ONION)
        return outcome


# =============================================================================
# BUILDINGS AND MACHINES
# =============================================================================

class CoopResolver(HarvestResolver):
    """Animal byproducts and slime balls inside coops and slime hutches."""

    name = "coop"

    @staticmethod
    def is_slime_ball(obj):
        return obj.big_craftable and SLIME_BALL_NAME in obj.name

    @classmethod
    def is_grabbable(cls, obj):
        if obj.big_craftable:
            return cls.is_slime_ball(obj)
        return any(token in obj.name for token in COOP_ITEM_TOKENS)

    def resolve(self, location, tile, source, container, rng=None):
        if container.is_full() or not self.is_grabbable(source):
            return HarvestOutcome()

        if self.is_slime_ball(source):
            if rng is None:
                rng = seeded_stream(tile, self.state.days_played, self.state.unique_id, SLIME_SEED_SALT)
            slime, petrified = roll_slime_yield(rng)
            stacks = [ItemStack.create(SLIME, slime)]
            if petrified > 0:
                stacks.append(ItemStack.create(PETRIFIED_SLIME, petrified))
        else:
            stacks = [source.to_stack()]

        outcome = self.commit(container, stacks, source.name)
        if outcome.blocked:
            return outcome

        location.remove_object(*tile)
        self.award(SKILL_FARMING, XP_COOP_ITEM)
        return outcome


class MushroomBoxResolver(HarvestResolver):
    """Produce waiting in a farm cave mushroom box."""

    name = "mushroom_box"

    @staticmethod
    def is_mushroom_box(obj):
        return obj.big_craftable and obj.item_id == MUSHROOM_BOX

    def resolve(self, location, tile, source, container, rng=None):
        if container.is_full() or not self.config.do_harvest_farm_cave:
            return HarvestOutcome()
        if not self.is_mushroom_box(source) or source.held_object is None:
            return HarvestOutcome()

        held = source.held_object
        outcome = self.commit(container, [held], held.name)
        if outcome.blocked:
            return outcome

        source.held_object = None
        return outcome


# =============================================================================
# DISPATCH TABLE
# =============================================================================

# Terrain features the crop pass harvests, keyed by feature kind
TERRAIN_RESOLVERS = {
    FeatureKind.HOE_DIRT: CropResolver,
    FeatureKind.FRUIT_TREE: FruitTreeResolver,
}

RESOLVER_CLASSES = {
    cls.name: cls for cls in (
        CropResolver, FruitTreeResolver, BushResolver, ForageResolver,
        SpringOnionResolver, CoopResolver, MushroomBoxResolver,
    )
}
