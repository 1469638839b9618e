# harvest_quality.py - Quality tiers and yield counts for harvested items
"""
Pure roll functions. Each takes the actor (or crop/tree) plus an RNG stream
and returns a number; none of them touch the world.

Draw order matters: a function that rolls twice always rolls in the same
order, so a seeded stream gives the same answer on a re-run.
"""

import math

from constants import (
    QUALITY_BASIC, QUALITY_SILVER, QUALITY_GOLD, QUALITY_IRIDIUM,
    FORAGE_GOLD_DIVISOR, FORAGE_SILVER_DIVISOR, GATHERER_EXTRA_CHANCE,
    CROP_GOLD_SKILL_WEIGHT, CROP_GOLD_FERTILIZER_WEIGHT, CROP_GOLD_BASE_CHANCE,
    CROP_SILVER_MAX_CHANCE, CROP_EXTRA_MAX_CHANCE,
    LUCK_LEVEL_DIVISOR, DAILY_LUCK_DIVISOR, LUCK_BASE_CHANCE,
    SUNFLOWER_SEED_RANGE, GEOMETRIC_LOOP_CAP,
    FRUIT_AGE_QUALITY_THRESHOLDS, BERRY_FARMING_DIVISOR,
    SLIME_COUNT_RANGE, PETRIFIED_SLIME_CHANCE,
    CROP_XP_SCALE, CROP_XP_PRICE_FACTOR,
)


# =============================================================================
# SHARED
# =============================================================================

def geometric_bonus(rng, chance, cap=GEOMETRIC_LOOP_CAP):
    """
    Count successes of `u < chance` until the first failure.

    Args:
        rng: Stream with next_double()
        chance: Per-draw success probability
        cap: Maximum number of successes

    Returns:
        Number of successes, at most cap
    """
    count = 0
    while count < cap and rng.next_double() < chance:
        count += 1
    return count


# =============================================================================
# FORAGE
# =============================================================================

def roll_forage_quality(actor, rng):
    """Botanist is always iridium; otherwise gold then silver by foraging level."""
    if actor.is_botanist:
        return QUALITY_IRIDIUM
    foraging = actor.foraging_level
    if rng.next_double() < foraging / FORAGE_GOLD_DIVISOR:
        return QUALITY_GOLD
    if rng.next_double() < foraging / FORAGE_SILVER_DIVISOR:
        return QUALITY_SILVER
    return QUALITY_BASIC


def roll_forage_stack_bonus(actor, rng):
    """Extra forage items for gatherers. No draws are made for anyone else."""
    if not actor.is_gatherer:
        return 0
    return geometric_bonus(rng, GATHERER_EXTRA_CHANCE)


def berry_count(actor):
    return 1 + actor.farming_level // BERRY_FARMING_DIVISOR


# =============================================================================
# CROPS
# =============================================================================

def crop_quality_chances(farming_level, fertilizer_boost):
    """
    Gold and silver chances for a crop.

    Args:
        farming_level: Actor farming level
        fertilizer_boost: 0 none, 1 basic fertilizer, 2 quality fertilizer

    Returns:
        (gold_chance, silver_chance)
    """
    gold = (CROP_GOLD_SKILL_WEIGHT * (farming_level / 10.0)
            + CROP_GOLD_FERTILIZER_WEIGHT * fertilizer_boost * ((farming_level + 2.0) / 12.0)
            + CROP_GOLD_BASE_CHANCE)
    silver = min(CROP_SILVER_MAX_CHANCE, gold * 2.0)
    return gold, silver


def roll_crop_quality(actor, fertilizer_boost, rng):
    gold, silver = crop_quality_chances(actor.farming_level, fertilizer_boost)
    if rng.next_double() < gold:
        return QUALITY_GOLD
    if rng.next_double() < silver:
        return QUALITY_SILVER
    return QUALITY_BASIC


def roll_crop_amount(crop, actor, rng):
    """
    Number of items one harvest of a crop yields before the luck double.

    Multi-harvest crops draw from [min, max + 1 + farming // per_level_increase),
    never narrower than the single value min. Crops with an extra-crop chance
    then add one item per successful draw.
    """
    amount = 1
    if crop.min_harvest > 1 or crop.max_harvest > 1:
        per_level = crop.max_harvest_increase_per_farming_level or 1
        upper = max(crop.min_harvest + 1,
                    crop.max_harvest + 1 + actor.farming_level // per_level)
        amount = rng.next_int(crop.min_harvest, upper)
    if crop.chance_for_extra_crops > 0.0:
        amount += geometric_bonus(rng, min(CROP_EXTRA_MAX_CHANCE, crop.chance_for_extra_crops))
    return amount


def roll_luck_double(actor, rng):
    """True if luck doubles a hand-harvested crop."""
    chance = (actor.luck_level / LUCK_LEVEL_DIVISOR
              + actor.daily_luck / DAILY_LUCK_DIVISOR
              + LUCK_BASE_CHANCE)
    return rng.next_double() < chance


def roll_sunflower_seed_count(rng):
    lo, hi = SUNFLOWER_SEED_RANGE
    return rng.next_int(lo, hi)


def crop_experience(price):
    """Farming experience for harvesting a crop that sells for `price`."""
    return int(round(CROP_XP_SCALE * math.log(CROP_XP_PRICE_FACTOR * price + 1.0)))


# =============================================================================
# FRUIT TREES
# =============================================================================

def fruit_quality(tree):
    """Older trees give better fruit; a recent lightning strike resets it to basic."""
    quality = QUALITY_BASIC
    for threshold, tier in FRUIT_AGE_QUALITY_THRESHOLDS:
        if tree.days_until_mature <= threshold:
            quality = tier
    if tree.struck_by_lightning_countdown > 0:
        quality = QUALITY_BASIC
    return quality


# =============================================================================
# SLIME
# =============================================================================

def roll_slime_yield(rng):
    """
    Slime and petrified slime dropped by one slime ball.

    Returns:
        (slime_count, petrified_count)
    """
    lo, hi = SLIME_COUNT_RANGE
    slime = rng.next_int(lo, hi)
    petrified = geometric_bonus(rng, PETRIFIED_SLIME_CHANCE)
    return slime, petrified
