"""
Tests for the harvest resolvers: eligibility, commit, source changes and
experience.
"""

from constants import (
    QUALITY_BASIC, QUALITY_GOLD, PROFESSION_GATHERER,
    HARVEST_METHOD_SCYTHE, SUNFLOWER_SEEDS, SPRING_ONION, SLIME, PETRIFIED_SLIME,
    FORAGE_CROP_SPRING_ONION, SLIME_BALL, SLIME_BALL_NAME,
)
from harvest_quality import crop_experience
from harvest_resolvers import (
    CropResolver, FruitTreeResolver, BushResolver, ForageResolver,
    SpringOnionResolver, CoopResolver, MushroomBoxResolver,
)
from world_objects import (
    Container, Crop, HoeDirt, FruitTree, Bush, IndoorPot, MushroomBox,
    PlacedObject, ItemStack,
)
from conftest import ScriptedRandom, NoDrawRandom


def _ready_crop(index=24, **kwargs):
    crop = Crop(index, [1, 1, 99999], **kwargs)
    crop.current_phase = crop.last_phase
    return crop


def _full_container():
    container = Container(capacity=1)
    container.add_item(ItemStack.create(16))
    return container


# ===================================================================
# Crops
# ===================================================================

class TestCropResolver:

    def test_harvests_ready_crop_and_clears_dirt(self, logic, state):
        dirt = HoeDirt(_ready_crop())
        container = Container(capacity=4)
        outcome = CropResolver(logic).resolve(state.farm, (1, 1), dirt, container, ScriptedRandom())
        assert outcome.harvested
        assert container.get_item(24, QUALITY_BASIC) == 1
        assert dirt.crop is None
        assert state.player.experience["farming"] == crop_experience(35)

    def test_not_ready_is_noop(self, logic, state):
        crop = Crop(24, [1, 1, 99999])
        dirt = HoeDirt(crop)
        container = Container(capacity=4)
        outcome = CropResolver(logic).resolve(state.farm, (1, 1), dirt, container, NoDrawRandom())
        assert not outcome.harvested
        assert dirt.crop is crop

    def test_dead_forage_and_empty_dirt_are_skipped(self, logic, state):
        resolver = CropResolver(logic)
        container = Container(capacity=4)
        for dirt in (HoeDirt(None), HoeDirt(_ready_crop(dead=True)),
                     HoeDirt(_ready_crop(forage_crop=True)), HoeDirt(_ready_crop(index=0))):
            assert not resolver.resolve(state.farm, (1, 1), dirt, container, NoDrawRandom()).harvested
        assert not container.has_contents()

    def test_regrowing_crop_resets_timer(self, logic, state):
        crop = _ready_crop(index=188, regrow_after_harvest=3)
        dirt = HoeDirt(crop)
        container = Container(capacity=4)
        resolver = CropResolver(logic)
        assert resolver.resolve(state.farm, (1, 1), dirt, container, ScriptedRandom()).harvested
        assert dirt.crop is crop
        assert crop.fully_grown
        assert crop.day_of_current_phase == 3
        assert not resolver.resolve(state.farm, (1, 1), dirt, container, ScriptedRandom()).harvested

    def test_flowers_skipped_when_disabled(self, logic, state):
        logic.config.do_harvest_flowers = False
        dirt = HoeDirt(_ready_crop(index=591, program_colored=True, tint_color=(255, 0, 0)))
        outcome = CropResolver(logic).resolve(state.farm, (1, 1), dirt, Container(), NoDrawRandom())
        assert not outcome.harvested
        assert dirt.crop is not None

    def test_flower_keeps_tint(self, logic, state):
        dirt = HoeDirt(_ready_crop(index=591, program_colored=True, tint_color=(255, 0, 0)))
        container = Container(capacity=4)
        CropResolver(logic).resolve(state.farm, (1, 1), dirt, container, ScriptedRandom())
        assert container.items[0].color == (255, 0, 0)

    def test_scythe_crop_is_one_stack_at_rolled_quality(self, logic, state):
        crop = _ready_crop(index=262, harvest_method=HARVEST_METHOD_SCYTHE, min_harvest=2, max_harvest=2)
        container = Container(capacity=4)
        rng = ScriptedRandom(doubles=[0.0])  # gold
        CropResolver(logic).resolve(state.farm, (1, 1), HoeDirt(crop), container, rng)
        assert container.occupied_count() == 1
        assert container.get_item(262, QUALITY_GOLD) == 2

    def test_luck_double_adds_base_quality_extras(self, logic, state):
        container = Container(capacity=4)
        rng = ScriptedRandom(doubles=[0.0, 0.00001])  # gold, then lucky
        CropResolver(logic).resolve(state.farm, (1, 1), HoeDirt(_ready_crop()), container, rng)
        assert container.get_item(24, QUALITY_GOLD) == 1
        assert container.get_item(24, QUALITY_BASIC) == 1

    def test_sunflower_yields_seeds(self, logic, state):
        dirt = HoeDirt(_ready_crop(index=421, program_colored=True, tint_color=(255, 215, 0)))
        container = Container(capacity=4)
        rng = ScriptedRandom(ints=[3])
        CropResolver(logic).resolve(state.farm, (1, 1), dirt, container, rng)
        assert container.get_item(421) == 1
        assert container.get_item(SUNFLOWER_SEEDS, QUALITY_BASIC) == 2
        assert rng.int_calls == [(1, 4)]
        assert state.player.experience["farming"] == crop_experience(ItemStack.create(421).price)

    def test_garden_pot(self, logic, state):
        pot = IndoorPot(HoeDirt(_ready_crop()))
        container = Container(capacity=4)
        assert CropResolver(logic).resolve(state.farm, (1, 1), pot, container, ScriptedRandom()).harvested
        assert pot.hoe_dirt.crop is None

    def test_batch_that_does_not_fit_is_blocked(self, logic, state):
        container = Container(capacity=2)
        container.add_item(ItemStack.create(16))
        crop = _ready_crop()
        dirt = HoeDirt(crop)
        rng = ScriptedRandom(doubles=[0.0, 0.00001])  # gold single + basic extra: two slots
        outcome = CropResolver(logic).resolve(state.farm, (1, 1), dirt, container, rng)
        assert outcome.blocked
        assert not outcome.harvested
        assert dirt.crop is crop
        assert container.occupied_count() == 1
        assert state.player.experience["farming"] == 0

    def test_full_container_is_noop(self, logic, state):
        dirt = HoeDirt(_ready_crop())
        outcome = CropResolver(logic).resolve(state.farm, (1, 1), dirt, _full_container(), NoDrawRandom())
        assert not outcome.harvested and not outcome.blocked
        assert dirt.crop is not None

    def test_no_experience_when_disabled(self, logic, state):
        logic.config.do_gain_experience = False
        CropResolver(logic).resolve(state.farm, (1, 1), HoeDirt(_ready_crop()), Container(), ScriptedRandom())
        assert state.player.experience["farming"] == 0

    def test_default_stream_is_seeded_by_tile_and_day(self, logic, state):
        a, b = Container(capacity=4), Container(capacity=4)
        crop_kwargs = dict(index=258, min_harvest=1, max_harvest=4, chance_for_extra_crops=0.5)
        CropResolver(logic).resolve(state.farm, (5, 9), HoeDirt(_ready_crop(**crop_kwargs)), a)
        CropResolver(logic).resolve(state.farm, (5, 9), HoeDirt(_ready_crop(**crop_kwargs)), b)
        assert a.items == b.items


# ===================================================================
# Fruit trees
# ===================================================================

class TestFruitTreeResolver:

    def test_old_tree_into_half_full_container(self, logic, state):
        container = Container(capacity=2)
        container.add_item(ItemStack.create(16))
        tree = FruitTree(613, growth_stage=4, fruits_on_tree=3, days_until_mature=-250)
        outcome = FruitTreeResolver(logic).resolve(state.farm, (2, 2), tree, container)
        assert outcome.harvested
        assert outcome.placed[0].stack == 3
        assert container.get_item(613, QUALITY_GOLD) == 3
        assert tree.fruits_on_tree == 0
        assert state.player.experience["foraging"] == 3

    def test_immature_or_empty_tree_is_noop(self, logic, state):
        resolver = FruitTreeResolver(logic)
        young = FruitTree(613, growth_stage=2, fruits_on_tree=3)
        bare = FruitTree(613, growth_stage=4, fruits_on_tree=0)
        assert not resolver.resolve(state.farm, (2, 2), young, Container()).harvested
        assert not resolver.resolve(state.farm, (2, 2), bare, Container()).harvested
        assert young.fruits_on_tree == 3

    def test_disabled_in_config(self, logic, state):
        logic.config.do_harvest_fruit_trees = False
        tree = FruitTree(613, growth_stage=4, fruits_on_tree=3)
        assert not FruitTreeResolver(logic).resolve(state.farm, (2, 2), tree, Container()).harvested
        assert tree.fruits_on_tree == 3


# ===================================================================
# World forage
# ===================================================================

class TestBushResolver:

    def test_second_call_yields_nothing(self, logic, state):
        bush = Bush(tile_sheet_offset=1)
        container = Container(capacity=4)
        resolver = BushResolver(logic)
        assert resolver.resolve(state.farm, (3, 3), bush, container, ScriptedRandom()).harvested
        assert bush.tile_sheet_offset == 0
        assert not resolver.resolve(state.farm, (3, 3), bush, container, NoDrawRandom()).harvested
        assert container.get_item(296) == 1

    def test_out_of_bloom(self, logic, state):
        state.day_of_month = 2
        bush = Bush(tile_sheet_offset=1)
        assert not BushResolver(logic).resolve(state.farm, (3, 3), bush, Container(), NoDrawRandom()).harvested
        assert bush.tile_sheet_offset == 1

    def test_fall_blackberries(self, logic, state):
        state.season, state.day_of_month = "fall", 9
        container = Container()
        BushResolver(logic).resolve(state.farm, (3, 3), Bush(tile_sheet_offset=1), container, ScriptedRandom())
        assert container.get_item(410) == 1

    def test_summer_has_no_berries(self, logic, state):
        state.season = "summer"
        bush = Bush(tile_sheet_offset=1)
        assert not BushResolver(logic).resolve(state.farm, (3, 3), bush, Container(), NoDrawRandom()).harvested


class TestForageResolver:

    def test_picks_up_and_removes(self, logic, state):
        forest = state.get_location_by_name("Forest")
        leek = forest.add_object(4, 4, PlacedObject(20))
        container = Container()
        outcome = ForageResolver(logic).resolve(forest, (4, 4), leek, container, ScriptedRandom())
        assert outcome.harvested
        assert forest.get_object_at(4, 4) is None
        assert container.get_item(20, QUALITY_BASIC) == 1
        assert state.player.experience["foraging"] == 7

    def test_gatherer_bonus(self, logic, state):
        state.player.professions.add(PROFESSION_GATHERER)
        forest = state.get_location_by_name("Forest")
        leek = forest.add_object(4, 4, PlacedObject(20))
        container = Container()
        rng = ScriptedRandom(doubles=[0.99, 0.99, 0.1, 0.5])
        ForageResolver(logic).resolve(forest, (4, 4), leek, container, rng)
        assert container.get_item(20) == 2

    def test_eligibility(self):
        assert ForageResolver.is_grabbable(PlacedObject(20))
        assert ForageResolver.is_grabbable(PlacedObject(9999, name="Odd Fruit", category=-79))
        assert not ForageResolver.is_grabbable(PlacedObject(440))
        assert not ForageResolver.is_grabbable(PlacedObject(20, big_craftable=True))

    def test_full_container_leaves_item(self, logic, state):
        forest = state.get_location_by_name("Forest")
        leek = forest.add_object(4, 4, PlacedObject(20))
        outcome = ForageResolver(logic).resolve(forest, (4, 4), leek, _full_container(), NoDrawRandom())
        assert not outcome.harvested
        assert forest.get_object_at(4, 4) is leek


class TestSpringOnionResolver:

    def test_harvests_onion(self, logic, state):
        forest = state.get_location_by_name("Forest")
        dirt = forest.add_feature(5, 5, HoeDirt(Crop(0, [99999], forage_crop=True,
                                                    which_forage_crop=FORAGE_CROP_SPRING_ONION)))
        container = Container()
        assert SpringOnionResolver(logic).resolve(forest, (5, 5), dirt, container, ScriptedRandom()).harvested
        assert container.get_item(SPRING_ONION) == 1
        assert dirt.crop is None
        assert state.player.experience["foraging"] == 3

    def test_row_crop_is_not_an_onion(self, logic, state):
        dirt = HoeDirt(_ready_crop())
        assert not SpringOnionResolver(logic).resolve(state.farm, (5, 5), dirt, Container(), NoDrawRandom()).harvested


# ===================================================================
# Buildings and machines
# ===================================================================

class TestCoopResolver:

    def test_egg(self, logic, state):
        egg = state.farm.add_object(1, 1, PlacedObject(176))
        container = Container()
        assert CoopResolver(logic).resolve(state.farm, (1, 1), egg, container).harvested
        assert container.get_item(176) == 1
        assert state.farm.get_object_at(1, 1) is None
        assert state.player.experience["farming"] == 5

    def test_slime_ball(self, logic, state):
        ball = state.farm.add_object(2, 2, PlacedObject(SLIME_BALL, name=SLIME_BALL_NAME, big_craftable=True))
        container = Container()
        rng = ScriptedRandom(doubles=[0.1, 0.9], ints=[12])
        assert CoopResolver(logic).resolve(state.farm, (2, 2), ball, container, rng).harvested
        assert container.get_item(SLIME) == 12
        assert container.get_item(PETRIFIED_SLIME) == 1
        assert state.farm.get_object_at(2, 2) is None

    def test_slime_ball_default_stream_in_range(self, logic, state):
        ball = state.farm.add_object(2, 2, PlacedObject(SLIME_BALL, name=SLIME_BALL_NAME, big_craftable=True))
        container = Container()
        CoopResolver(logic).resolve(state.farm, (2, 2), ball, container)
        assert 10 <= container.get_item(SLIME) <= 20

    def test_eligibility(self):
        assert CoopResolver.is_grabbable(PlacedObject(174))   # Large Egg
        assert CoopResolver.is_grabbable(PlacedObject(446))   # Rabbit's Foot
        assert not CoopResolver.is_grabbable(PlacedObject(24))
        assert not CoopResolver.is_grabbable(PlacedObject(130, name="Chest", big_craftable=True))


class TestMushroomBoxResolver:

    def test_moves_held_item(self, logic, state):
        box = MushroomBox(ItemStack.create(404))
        container = Container()
        assert MushroomBoxResolver(logic).resolve(state.farm, (1, 1), box, container).harvested
        assert box.held_object is None
        assert container.get_item(404) == 1
        assert state.player.experience["foraging"] == 0

    def test_empty_box_and_disabled_config(self, logic, state):
        resolver = MushroomBoxResolver(logic)
        assert not resolver.resolve(state.farm, (1, 1), MushroomBox(), Container()).harvested
        logic.config.do_harvest_farm_cave = False
        box = MushroomBox(ItemStack.create(420))
        assert not resolver.resolve(state.farm, (1, 1), box, Container()).harvested
        assert box.held_object is not None
