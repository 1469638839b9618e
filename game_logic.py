# game_logic.py - Harvest entry points: day start, object events, experience
"""
This module contains the logic that operates on GameState.
It does NOT hold any world state itself - all state is in GameState.

The host calls two entry points:
- on_day_started(): runs the building, crop and world passes in order
- on_object_list_changed(location, added): collects truffles as they appear
"""

from constants import FARM_LOCATION, TRUFFLE, SKILLS
from harvest_resolvers import ForageResolver
from harvest_rng import unseeded_stream
from harvest_system import HarvestSystem
from mod_config import GrabberConfig, GrabberAPI


class GameLogic:
    """
    Contains the harvest logic that operates on a GameState instance.

    This class:
    - Takes a GameState and modifies it
    - Owns the runtime config and the HarvestSystem
    - Is the only place experience is awarded to the actor
    - Does NOT hold persistent world state (that's in GameState)
    """

    def __init__(self, state, config=None):
        """
        Args:
            state: GameState instance to operate on
            config: GrabberConfig; defaults are used if None
        """
        self.state = state
        self.config = config if config is not None else GrabberConfig()
        self.harvest = HarvestSystem(self)

    # =========================================================================
    # HELPER METHODS
    # =========================================================================

    def gain_experience(self, skill_id, amount):
        """Award experience to the actor if experience gain is enabled."""
        if not self.config.do_gain_experience or amount <= 0:
            return
        if skill_id not in SKILLS:
            self.state.log_action(f"Unknown skill '{skill_id}', no experience awarded")
            return
        self.state.player.gain_experience(skill_id, amount)

    def get_api(self):
        """Read-only config view for other components."""
        return GrabberAPI(self.config)

    # =========================================================================
    # DAY START
    # =========================================================================

    def on_day_started(self, rng=None):
        """
        Run the daily collection passes.

        Args:
            rng: Stream for the world pass; a fresh unseeded stream if None

        Returns:
            List of PassReport, in pass order
        """
        return [
            self.harvest.autograb_buildings(),
            self.harvest.autograb_crops(),
            self.harvest.autograb_world(rng),
        ]

    # =========================================================================
    # OBJECT EVENTS
    # =========================================================================

    def _truffle_grabber(self, location):
        """The global grabber if configured, else the first grabber in the event location."""
        grabber, _reason = self.harvest.find_global_grabber()
        if grabber is None:
            grabber = location.find_first_collector()
        return grabber

    def on_object_list_changed(self, location, added, rng=None):
        """
        Collect truffles that were just placed on the farm.

        Args:
            location: Location whose object list changed
            added: (tile, object) pairs that were added
            rng: Stream for the quality and stack rolls; fresh if None

        Returns:
            Number of truffles collected
        """
        if not self.config.do_harvest_truffles:
            return 0
        if location.name.lower() != FARM_LOCATION.lower():
            return 0

        truffles = [(tile, obj) for tile, obj in added
                    if not obj.big_craftable and obj.item_id == TRUFFLE]
        if not truffles:
            return 0

        grabber = self._truffle_grabber(location)
        if grabber is None:
            self.state.log_action("No auto-grabber for truffles")
            return 0

        rng = rng or unseeded_stream()
        resolver = self.harvest.resolvers[ForageResolver.name]
        collected = 0
        for tile, truffle in truffles:
            if grabber.container.is_full():
                break
            if location.get_object_at(*tile) is not truffle:
                self.state.log_action(f"Truffle at {tile} is gone, skipping")
                continue
            outcome = resolver.resolve(location, tile, truffle, grabber.container, rng)
            if outcome.harvested:
                collected += 1

        grabber.refresh_sprite()
        return collected
