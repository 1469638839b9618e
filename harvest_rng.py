# harvest_rng.py - Random streams for harvest rolls
"""
Every roll the harvest engine makes comes from an explicit stream object.

Two kinds of stream:
- seeded_stream(tile, days_played, world_id, salt): deterministic for the
  same tile on the same day in the same world. Crops and slime balls use it
  so re-running a pass on the same day gives the same rolls.
- unseeded_stream(): fresh entropy, one per world pass. The entropy is
  recorded on the stream (stream.seed) so a pass can be replayed.

Resolvers only ever call next_double() and next_int(lo, hi), so tests can
pass any object with those two methods to pin the draws.
"""

import numpy as np

from constants import CROP_SEED_SALT

SEED_MASK = 0xFFFFFFFF  # SeedSequence only takes non-negative integers


class HarvestRandom:
    """A numpy Generator with the two draws the harvest engine uses."""

    def __init__(self, seed_sequence):
        self.seed_sequence = seed_sequence
        self.seed = seed_sequence.entropy
        self._generator = np.random.Generator(np.random.PCG64(seed_sequence))

    def next_double(self):
        """Uniform float in [0, 1)."""
        return float(self._generator.random())

    def next_int(self, lo, hi):
        """Uniform integer in [lo, hi). Returns lo when the range is empty."""
        if hi <= lo:
            return lo
        return int(self._generator.integers(lo, hi))

    def __repr__(self):
        return f"<HarvestRandom seed={self.seed}>"


def seeded_stream(tile, days_played, world_id, salt=CROP_SEED_SALT):
    """
    Deterministic stream for one tile on one day.

    Args:
        tile: (x, y) tile of the thing being harvested
        days_played: Days elapsed in the world
        world_id: World instance id
        salt: Per-purpose salt (CROP_SEED_SALT, SLIME_SEED_SALT)

    Returns:
        HarvestRandom whose draws depend only on the arguments
    """
    x, y = tile
    entropy = [int(x) & SEED_MASK, int(y) & SEED_MASK, int(days_played) & SEED_MASK,
               int(world_id) & SEED_MASK, int(salt) & SEED_MASK]
    return HarvestRandom(np.random.SeedSequence(entropy))


def unseeded_stream():
    """Fresh stream seeded from OS entropy."""
    return HarvestRandom(np.random.SeedSequence())


def replay_stream(seed):
    """Rebuild a stream from the seed recorded on an earlier one."""
    return HarvestRandom(np.random.SeedSequence(seed))
