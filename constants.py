# constants.py - Harvest rules and game-balance configuration
# This file defines HOW harvesting works, not WHAT is in the world (that's in scenario_*.py files)

# =============================================================================
# CALENDAR SETTINGS
# =============================================================================
SEASONS = ["spring", "summer", "fall", "winter"]
DAYS_PER_SEASON = 28

# =============================================================================
# QUALITY TIERS
# =============================================================================
# Tier 3 is unused by the host game; iridium jumps straight to 4
QUALITY_BASIC = 0
QUALITY_SILVER = 1
QUALITY_GOLD = 2
QUALITY_IRIDIUM = 4
QUALITY_NAMES = {
    QUALITY_BASIC: "basic",
    QUALITY_SILVER: "silver",
    QUALITY_GOLD: "gold",
    3: "3",
    QUALITY_IRIDIUM: "iridium",
}

# =============================================================================
# SKILLS AND PROFESSIONS
# =============================================================================
SKILL_FARMING = "farming"
SKILL_FORAGING = "foraging"
SKILLS = {
    SKILL_FARMING: {"name": "Farming"},
    SKILL_FORAGING: {"name": "Foraging"},
}

PROFESSION_BOTANIST = "botanist"   # forage is always iridium quality
PROFESSION_GATHERER = "gatherer"   # chance for extra forage items

# Experience awarded per harvested thing
XP_COOP_ITEM = 5          # farming
XP_FRUIT = 3              # foraging
XP_SPRING_ONION = 3       # foraging
XP_FORAGE = 7             # foraging (ground forage and truffles)

# Crop XP = round(CROP_XP_SCALE * ln(CROP_XP_PRICE_FACTOR * price + 1))
CROP_XP_SCALE = 16.0
CROP_XP_PRICE_FACTOR = 0.018

# =============================================================================
# CONTAINER SETTINGS
# =============================================================================
GRABBER_CAPACITY = 36
MAX_STACK_SIZE = 999

# =============================================================================
# RANDOMNESS
# =============================================================================
# Hard cap on every "while random < p" loop
GEOMETRIC_LOOP_CAP = 100

# Seed salts so crops and slime balls on the same tile/day draw different streams
CROP_SEED_SALT = 0
SLIME_SEED_SALT = 2

# =============================================================================
# FORAGE QUALITY
# =============================================================================
FORAGE_GOLD_DIVISOR = 30.0     # gold if u < foraging / 30
FORAGE_SILVER_DIVISOR = 15.0   # silver if u < foraging / 15
GATHERER_EXTRA_CHANCE = 0.2

# =============================================================================
# CROP QUALITY AND YIELD
# =============================================================================
CROP_GOLD_SKILL_WEIGHT = 0.2
CROP_GOLD_FERTILIZER_WEIGHT = 0.2
CROP_GOLD_BASE_CHANCE = 0.01
CROP_SILVER_MAX_CHANCE = 0.75
CROP_EXTRA_MAX_CHANCE = 0.9

FERTILIZER_BASIC = 368
FERTILIZER_QUALITY = 369
FERTILIZER_BOOSTS = {
    FERTILIZER_BASIC: 1,
    FERTILIZER_QUALITY: 2,
}

HARVEST_METHOD_HAND = 0
HARVEST_METHOD_SCYTHE = 1
NO_REGROWTH = -1

# Luck-based double harvest for hand-picked crops
LUCK_LEVEL_DIVISOR = 1500.0
DAILY_LUCK_DIVISOR = 1200.0
LUCK_BASE_CHANCE = 0.0001

SUNFLOWER = 421
SUNFLOWER_SEEDS = 431
SUNFLOWER_SEED_RANGE = (1, 4)   # next_int bounds, upper exclusive

# Harvest ids treated as flowers when flower harvesting is disabled
FLOWER_HARVEST_IDS = {
    421,  # Sunflower
    593,  # Summer Spangle
    595,  # Fairy Rose
    591,  # Tulip
    597,  # Blue Jazz
    376,  # Poppy
}

FORAGE_CROP_SPRING_ONION = 1

# =============================================================================
# FRUIT TREE SETTINGS
# =============================================================================
FRUIT_TREE_MATURE_STAGE = 4
FRUIT_TREE_MAX_FRUIT = 3
# (days_until_mature threshold, quality); roughly 4/8/12 months past maturity
FRUIT_AGE_QUALITY_THRESHOLDS = [
    (-112, QUALITY_SILVER),
    (-224, QUALITY_GOLD),
    (-336, QUALITY_IRIDIUM),
]

# =============================================================================
# BUSH SETTINGS
# =============================================================================
BUSH_SMALL = 0
BUSH_MEDIUM = 1
BUSH_LARGE = 2
# season -> (first bloom day, last bloom day, berry id)
BUSH_BLOOM = {
    "spring": (15, 18, 296),
    "fall": (8, 11, 410),
}
BERRY_FARMING_DIVISOR = 4   # berries per harvest = 1 + farming // 4

# =============================================================================
# SLIME HUTCH SETTINGS
# =============================================================================
SLIME = 766
PETRIFIED_SLIME = 557
SLIME_COUNT_RANGE = (10, 21)   # next_int bounds, upper exclusive
PETRIFIED_SLIME_CHANCE = 0.33

# =============================================================================
# OBJECT IDENTITIES
# =============================================================================
MUSHROOM_BOX = 128      # big craftable
AUTO_GRABBER = 165      # big craftable
SLIME_BALL = 56         # big craftable
TRUFFLE = 430
SPRING_ONION = 399

FARM_LOCATION = "Farm"
SPRING_ONION_LOCATION = "Forest"

# Building types containing one of these tokens get the building pass
COOP_BUILDING_TOKENS = ("Coop", "Slime")
# Object names containing one of these tokens are animal byproducts
COOP_ITEM_TOKENS = ("Egg", "Wool", "Foot", "Feather")
SLIME_BALL_NAME = "Slime Ball"

# Object categories the world treats as forage
CATEGORY_GREENS = -81
CATEGORY_FRUIT = -79
CATEGORY_FLOWERS = -80
CATEGORY_VEGETABLE = -75
CATEGORY_FISH_SHOP = -23
CATEGORY_BIG_CRAFTABLE = -9
FORAGE_CATEGORIES = {
    CATEGORY_GREENS, CATEGORY_FRUIT, CATEGORY_FLOWERS, CATEGORY_VEGETABLE, CATEGORY_FISH_SHOP,
}

# =============================================================================
# ITEM REGISTRY
# =============================================================================
# Central item registry - only what harvests need (name, sell price, category)
ITEMS = {
    # Forage
    16: {"name": "Wild Horseradish", "price": 50, "category": CATEGORY_GREENS},
    18: {"name": "Daffodil", "price": 30, "category": CATEGORY_GREENS},
    20: {"name": "Leek", "price": 60, "category": CATEGORY_GREENS},
    22: {"name": "Dandelion", "price": 40, "category": CATEGORY_GREENS},
    78: {"name": "Cave Carrot", "price": 25, "category": CATEGORY_GREENS},
    88: {"name": "Coconut", "price": 100, "category": CATEGORY_GREENS},
    90: {"name": "Cactus Fruit", "price": 75, "category": CATEGORY_GREENS},
    257: {"name": "Morel", "price": 150, "category": CATEGORY_GREENS},
    259: {"name": "Fiddlehead Fern", "price": 90, "category": CATEGORY_GREENS},
    281: {"name": "Chanterelle", "price": 160, "category": CATEGORY_GREENS},
    283: {"name": "Holly", "price": 80, "category": CATEGORY_GREENS},
    296: {"name": "Salmonberry", "price": 5, "category": CATEGORY_FRUIT},
    372: {"name": "Clam", "price": 50, "category": CATEGORY_FISH_SHOP},
    392: {"name": "Nautilus Shell", "price": 120, "category": CATEGORY_FISH_SHOP},
    393: {"name": "Coral", "price": 80, "category": CATEGORY_FISH_SHOP},
    394: {"name": "Rainbow Shell", "price": 300, "category": CATEGORY_FISH_SHOP},
    396: {"name": "Spice Berry", "price": 80, "category": CATEGORY_FRUIT},
    397: {"name": "Sea Urchin", "price": 160, "category": CATEGORY_FISH_SHOP},
    398: {"name": "Grape", "price": 80, "category": CATEGORY_FRUIT},
    399: {"name": "Spring Onion", "price": 8, "category": CATEGORY_GREENS},
    402: {"name": "Sweet Pea", "price": 50, "category": CATEGORY_FLOWERS},
    404: {"name": "Common Mushroom", "price": 40, "category": CATEGORY_GREENS},
    406: {"name": "Wild Plum", "price": 80, "category": CATEGORY_FRUIT},
    408: {"name": "Hazelnut", "price": 90, "category": CATEGORY_GREENS},
    410: {"name": "Blackberry", "price": 20, "category": CATEGORY_FRUIT},
    412: {"name": "Winter Root", "price": 70, "category": CATEGORY_GREENS},
    414: {"name": "Crystal Fruit", "price": 150, "category": CATEGORY_FRUIT},
    416: {"name": "Snow Yam", "price": 100, "category": CATEGORY_GREENS},
    418: {"name": "Crocus", "price": 60, "category": CATEGORY_FLOWERS},
    420: {"name": "Red Mushroom", "price": 75, "category": CATEGORY_GREENS},
    422: {"name": "Purple Mushroom", "price": 250, "category": CATEGORY_GREENS},
    430: {"name": "Truffle", "price": 625, "category": CATEGORY_GREENS},
    718: {"name": "Cockle", "price": 50, "category": CATEGORY_FISH_SHOP},
    719: {"name": "Mussel", "price": 30, "category": CATEGORY_FISH_SHOP},
    723: {"name": "Oyster", "price": 40, "category": CATEGORY_FISH_SHOP},
    # Crops
    24: {"name": "Parsnip", "price": 35, "category": CATEGORY_VEGETABLE},
    188: {"name": "Green Bean", "price": 40, "category": CATEGORY_VEGETABLE},
    190: {"name": "Cauliflower", "price": 175, "category": CATEGORY_VEGETABLE},
    192: {"name": "Potato", "price": 80, "category": CATEGORY_VEGETABLE},
    258: {"name": "Blueberry", "price": 50, "category": CATEGORY_FRUIT},
    262: {"name": "Wheat", "price": 25, "category": -74},
    270: {"name": "Corn", "price": 50, "category": CATEGORY_VEGETABLE},
    276: {"name": "Pumpkin", "price": 320, "category": CATEGORY_VEGETABLE},
    376: {"name": "Poppy", "price": 140, "category": CATEGORY_FLOWERS},
    400: {"name": "Strawberry", "price": 120, "category": CATEGORY_FRUIT},
    421: {"name": "Sunflower", "price": 80, "category": CATEGORY_FLOWERS},
    431: {"name": "Sunflower Seeds", "price": 20, "category": -74},
    591: {"name": "Tulip", "price": 30, "category": CATEGORY_FLOWERS},
    593: {"name": "Summer Spangle", "price": 90, "category": CATEGORY_FLOWERS},
    595: {"name": "Fairy Rose", "price": 290, "category": CATEGORY_FLOWERS},
    597: {"name": "Blue Jazz", "price": 50, "category": CATEGORY_FLOWERS},
    # Fruit tree fruit
    613: {"name": "Apple", "price": 100, "category": CATEGORY_FRUIT},
    634: {"name": "Apricot", "price": 50, "category": CATEGORY_FRUIT},
    635: {"name": "Orange", "price": 100, "category": CATEGORY_FRUIT},
    636: {"name": "Peach", "price": 140, "category": CATEGORY_FRUIT},
    637: {"name": "Pomegranate", "price": 140, "category": CATEGORY_FRUIT},
    638: {"name": "Cherry", "price": 80, "category": CATEGORY_FRUIT},
    # Animal products
    174: {"name": "Large Egg", "price": 95, "category": -5},
    176: {"name": "Egg", "price": 50, "category": -5},
    305: {"name": "Void Egg", "price": 65, "category": -5},
    440: {"name": "Wool", "price": 340, "category": -18},
    442: {"name": "Duck Egg", "price": 95, "category": -5},
    444: {"name": "Duck Feather", "price": 250, "category": -18},
    446: {"name": "Rabbit's Foot", "price": 565, "category": -18},
    557: {"name": "Petrified Slime", "price": 120, "category": -15},
    766: {"name": "Slime", "price": 5, "category": -28},
}

# Objects the global grabber always picks up, whatever their category
FORAGE_ITEM_IDS = {
    16, 18, 20, 22, 430, 399, 257, 404, 296, 396, 398, 402, 420, 259, 406,
    408, 410, 281, 412, 414, 416, 418, 283, 392, 393, 397, 394, 372, 718,
    719, 723, 78, 90, 88,
}

# =============================================================================
# LOGGING
# =============================================================================
LOGGER_NAME = "grabber"
ACTION_LOG_LIMIT = 1000
