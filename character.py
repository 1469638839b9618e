# character.py - The farmer whose skills drive harvest quality
"""
Actor class holding the skill and profession snapshot the harvest engine reads.

Design:
- Skills are stored by id ('farming', 'foraging'), levels 0-10
- Professions are string flags ('botanist', 'gatherer')
- The harvest engine never writes to an Actor except through gain_experience()
- Position (location name + tile) is only used by console commands
"""

from constants import SKILLS, PROFESSION_BOTANIST, PROFESSION_GATHERER, SKILL_FARMING, SKILL_FORAGING
from scenario_characters import CHARACTER_TEMPLATES


class Actor:
    """
    The player character, as seen by the harvest engine.
    """

    def __init__(self, name, skills=None, professions=None, luck_level=0, daily_luck=0.0,
                 location_name=None, tile=(0, 0)):
        """
        Args:
            name: Display name
            skills: Dict of skill id -> level
            professions: Iterable of profession flags
            luck_level: Luck skill level (buff-driven)
            daily_luck: Today's luck, roughly -0.1 to 0.1
            location_name: Name of the location the actor stands in
            tile: (x, y) tile the actor stands on
        """
        self.name = name
        self.skills = {skill_id: 0 for skill_id in SKILLS}
        for skill_id, value in (skills or {}).items():
            self.skills[skill_id] = value
        self.professions = set(professions or ())
        self.luck_level = luck_level
        self.daily_luck = daily_luck
        self.location_name = location_name
        self.tile = (int(tile[0]), int(tile[1]))

        # Experience points gained per skill (the only thing the engine changes)
        self.experience = {skill_id: 0 for skill_id in SKILLS}

    # =========================================================================
    # SKILL QUERIES
    # =========================================================================

    def get_skill_level(self, skill_id):
        return self.skills.get(skill_id, 0)

    @property
    def farming_level(self):
        return self.get_skill_level(SKILL_FARMING)

    @property
    def foraging_level(self):
        return self.get_skill_level(SKILL_FORAGING)

    def has_profession(self, profession):
        return profession in self.professions

    @property
    def is_botanist(self):
        """Quality boost trait: forage is always best quality."""
        return self.has_profession(PROFESSION_BOTANIST)

    @property
    def is_gatherer(self):
        """Extra yield trait: chance of extra forage items."""
        return self.has_profession(PROFESSION_GATHERER)

    # =========================================================================
    # EFFECTS
    # =========================================================================

    def gain_experience(self, skill_id, amount):
        """Award experience points in a skill."""
        self.experience[skill_id] = self.experience.get(skill_id, 0) + amount

    def __repr__(self):
        return f"<Actor '{self.name}' farming={self.farming_level} foraging={self.foraging_level}>"


def create_actor(name, location_name=None, tile=None):
    """Create an actor from CHARACTER_TEMPLATES."""
    template = CHARACTER_TEMPLATES[name]
    return Actor(
        name,
        skills=template.get('starting_skills', {}),
        professions=template.get('professions', ()),
        luck_level=template.get('luck_level', 0),
        daily_luck=template.get('daily_luck', 0.0),
        location_name=location_name if location_name is not None else template.get('starting_location'),
        tile=tile if tile is not None else template.get('starting_tile', (0, 0)),
    )
