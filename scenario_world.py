# scenario_world.py - World layout: locations, grabbers, crops, forage
# Edit this file to create a new world within the same harvest rules

# =============================================================================
# WORLD IDENTITY
# =============================================================================
UNIQUE_ID = 314159265   # World instance id (seed material for tile/day rolls)
START_SEASON = "spring"
START_DAY_OF_MONTH = 15
START_YEAR = 1

# =============================================================================
# LOCATIONS (JSON-serializable)
# =============================================================================
# Location order is the order every pass visits them
LOCATIONS = [
    {"name": "Farm"},
    {"name": "Forest"},
    {"name": "Beach"},
    {"name": "FarmCave", "is_farm_cave": True},
]

# =============================================================================
# GRABBERS
# =============================================================================
# Auto-grabbers placed in the world. Coop grabbers are listed with their building.
GRABBERS = [
    {"location": "Farm", "position": [64, 15]},   # Crop grabber and global forage target
    {"location": "Farm", "position": [70, 22]},   # Orchard grabber
]

# =============================================================================
# CROP DEFINITIONS
# =============================================================================
# Keyword arguments for Crop; the last phase_days entry is the ready phase
CROP_DEFS = {
    "parsnip": {"index_of_harvest": 24, "phase_days": [1, 1, 1, 1, 99999]},
    "potato": {
        "index_of_harvest": 192, "phase_days": [1, 1, 1, 2, 1, 99999],
        "chance_for_extra_crops": 0.2,
    },
    "green_bean": {
        "index_of_harvest": 188, "phase_days": [1, 1, 1, 3, 4, 99999],
        "regrow_after_harvest": 3,
    },
    "wheat": {
        "index_of_harvest": 262, "phase_days": [1, 1, 1, 1, 99999],
        "harvest_method": 1,
    },
    "blueberry": {
        "index_of_harvest": 258, "phase_days": [1, 3, 3, 4, 2, 99999],
        "min_harvest": 3, "max_harvest": 3, "chance_for_extra_crops": 0.02,
        "regrow_after_harvest": 4,
    },
    "tulip": {
        "index_of_harvest": 591, "phase_days": [1, 1, 2, 2, 99999],
        "program_colored": True, "tint_color": [255, 186, 255],
    },
    "sunflower": {
        "index_of_harvest": 421, "phase_days": [1, 2, 3, 2, 99999],
        "program_colored": True, "tint_color": [255, 215, 0],
    },
}

# =============================================================================
# PLANTED CROPS
# =============================================================================
# crop: key into CROP_DEFS; ready: start in the final phase
# fertilizer: 0 none, 368 basic, 369 quality
CROPS = [
    {"location": "Farm", "position": [62, 14], "crop": "parsnip", "ready": True},
    {"location": "Farm", "position": [63, 14], "crop": "parsnip", "ready": True, "fertilizer": 369},
    {"location": "Farm", "position": [65, 14], "crop": "potato", "ready": True, "fertilizer": 368},
    {"location": "Farm", "position": [66, 14], "crop": "green_bean", "ready": True},
    {"location": "Farm", "position": [62, 16], "crop": "wheat", "ready": True},
    {"location": "Farm", "position": [63, 16], "crop": "blueberry", "ready": False},
    {"location": "Farm", "position": [65, 16], "crop": "tulip", "ready": True},
    {"location": "Farm", "position": [66, 16], "crop": "sunflower", "ready": True},
]

# Garden pots: position and crop like CROPS
POTS = [
    {"location": "Farm", "position": [64, 17], "crop": "parsnip", "ready": True},
]

# =============================================================================
# FRUIT TREES
# =============================================================================
FRUIT_TREES = [
    {"location": "Farm", "position": [68, 20], "fruit": 613, "fruits_on_tree": 3, "days_until_mature": -250},
    {"location": "Farm", "position": [72, 20], "fruit": 638, "fruits_on_tree": 2, "days_until_mature": -10},
    {"location": "Farm", "position": [72, 24], "fruit": 636, "fruits_on_tree": 1, "days_until_mature": -400,
     "struck_by_lightning_countdown": 2},
]

# =============================================================================
# BERRY BUSHES
# =============================================================================
BUSHES = [
    {"location": "Forest", "position": [20, 30], "tile_sheet_offset": 1},
    {"location": "Forest", "position": [24, 31], "tile_sheet_offset": 1},
    {"location": "Beach", "position": [5, 5], "size": 0},
]

# =============================================================================
# SPRING ONIONS
# =============================================================================
SPRING_ONIONS = [
    {"location": "Forest", "position": [40, 12]},
    {"location": "Forest", "position": [41, 12]},
]

# =============================================================================
# GROUND FORAGE
# =============================================================================
FORAGE = [
    {"location": "Forest", "position": [10, 10], "item_id": 16},
    {"location": "Forest", "position": [11, 14], "item_id": 22},
    {"location": "Forest", "position": [30, 8], "item_id": 20},
    {"location": "Beach", "position": [12, 30], "item_id": 372},
    {"location": "Beach", "position": [18, 33], "item_id": 393},
    {"location": "Beach", "position": [25, 31], "item_id": 719},
]

# =============================================================================
# FARM CAVE
# =============================================================================
MUSHROOM_BOXES = [
    {"location": "FarmCave", "position": [4, 5], "held": 404},
    {"location": "FarmCave", "position": [6, 5], "held": 420},
    {"location": "FarmCave", "position": [8, 5], "held": None},
]

# =============================================================================
# FARM BUILDINGS
# =============================================================================
# grabber: interior tile of the auto-grabber (None = no grabber)
# items: byproducts lying inside; slime balls are big craftables
BUILDINGS = [
    {
        "type": "Big Coop",
        "position": [55, 10],
        "grabber": [2, 3],
        "items": [
            {"item_id": 176, "position": [4, 5]},
            {"item_id": 176, "position": [5, 5]},
            {"item_id": 174, "position": [6, 5]},
            {"item_id": 444, "position": [7, 5]},
            {"item_id": 446, "position": [8, 5]},
        ],
    },
    {
        "type": "Slime Hutch",
        "position": [50, 20],
        "grabber": [3, 3],
        "slime_balls": [[6, 6], [9, 6]],
    },
    {
        "type": "Barn",
        "position": [45, 10],
        "grabber": None,
        "items": [
            {"item_id": 440, "position": [4, 4]},
        ],
    },
]
