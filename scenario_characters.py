# scenario_characters.py - Actor definitions
# Edit this file to change who the harvest engine works for

# =============================================================================
# CHARACTER TEMPLATES (JSON-serializable)
# =============================================================================
# - starting_skills: skill id -> level (0-10)
# - professions: 'botanist' (iridium forage), 'gatherer' (extra forage)
# - starting_location / starting_tile: where console commands report the actor
CHARACTER_TEMPLATES = {
    "Farmer": {
        "starting_skills": {"farming": 6, "foraging": 5},
        "professions": ["gatherer"],
        "luck_level": 0,
        "daily_luck": 0.02,
        "starting_location": "Farm",
        "starting_tile": [64, 15],
    },
    "Botanist": {
        "starting_skills": {"farming": 10, "foraging": 10},
        "professions": ["gatherer", "botanist"],
        "luck_level": 1,
        "daily_luck": 0.0,
        "starting_location": "Farm",
        "starting_tile": [64, 15],
    },
}

PLAYER_NAME = "Farmer"
