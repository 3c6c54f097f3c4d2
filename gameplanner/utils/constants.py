"""
Constants for the Game Planner application.

This module contains the static reference data (match durations and the
formation catalog) together with the option sets and defaults used to
build match settings.
"""

# Application metadata
APP_TITLE = "Game Planner"

# Fixed match durations per game format (minutes)
MATCH_DURATIONS = {
    "5v5": 40,
    "7v7": 50,
    "9v9": 60,
    "11v11": 70,
}

GAME_FORMATS = list(MATCH_DURATIONS.keys())

# Only the smallest format may be played in quarters
QUARTERS_FORMAT = "5v5"

# Outfield positions per formation, keyed by game format.
# The number of labels is the outfield spot count for that format.
FORMATIONS = {
    "5v5": {
        "1-2-1": ["CD", "CM-R", "CM-L", "ST"],
        "2-1-1": ["CD-R", "CD-L", "CM", "ST"],
        "1-1-2": ["CD", "CM", "ST-R", "ST-L"],
    },
    "7v7": {
        "2-1-3": ["CD-R", "CD-L", "CM", "ST-R", "ST-L", "ST"],
        "2-2-2": ["CD-R", "CD-L", "CM-R", "CM-L", "ST-R", "ST-L"],
        "1-3-2": ["CD", "CM-R", "CM-L", "CM", "ST-R", "ST-L"],
        "2-3-1": ["CD-R", "CD-L", "CM-R", "CM-L", "CM", "ST"],
        "1-2-3": ["CD", "CM-R", "CM-L", "ST-R", "ST-L", "ST"],
        "1-4-1": ["CD", "CM-R", "CM-L", "RW", "LW", "ST"],
    },
    "9v9": {
        "3-2-3": ["CD-R", "CD-L", "CD", "CM-R", "CM-L", "ST-R", "ST-L", "ST"],
        "3-3-2": ["CD-R", "CD-L", "CD", "CM-R", "CM-L", "CDM", "ST-R", "ST-L"],
        "3-4-1": ["CD-R", "CD-L", "CD", "RB", "LB", "CM", "CDM", "ST"],
        "3-2-1-2": ["CD-R", "CD-L", "CD", "CDM-R", "CDM-L", "CAM", "ST-R", "ST-L"],
        "2-4-2": ["CD-R", "CD-L", "CM-R", "CM-L", "CDM", "CAM", "ST-R", "ST-L"],
        "2-3-3": ["CD-R", "CD-L", "CM-R", "CM-L", "CDM", "ST-R", "ST-L", "ST"],
        "2-2-4": ["CD-R", "CD-L", "CM-R", "CM-L", "ST-R", "ST-L", "RW", "LW"],
    },
    "11v11": {
        "4-4-2": ["RB", "LB", "CD-R", "CD-L", "RW", "LW", "CM-R", "CM-L", "ST-R", "ST-L"],
        "4-3-3": ["RB", "LB", "CD-R", "CD-L", "CM-R", "CM-L", "CDM", "RW", "LW", "ST"],
        "4-2-3-1": ["RB", "LB", "CD-R", "CD-L", "CDM-R", "CDM-L", "RW", "LW", "CAM", "ST"],
        "4-1-4-1": ["RB", "LB", "CD-R", "CD-L", "CDM", "CM-R", "CM-L", "RW", "LW", "ST"],
        "4-2-4": ["RB", "LB", "CD-R", "CD-L", "CM-R", "CM-L", "ST-R", "ST-L", "RW", "LW"],
        "3-5-2": ["CD-R", "CD-L", "CD", "CM-R", "CM-L", "CDM", "CAM", "RW", "ST-R", "ST-L"],
        "3-4-3": ["CD-R", "CD-L", "CD", "CM-R", "CM-L", "CDM", "CAM", "RW", "LW", "ST"],
    },
}

# Outfield spot count per format
OUTFIELD_SPOTS = {fmt: len(next(iter(table.values()))) for fmt, table in FORMATIONS.items()}

# All position labels a player may prefer
ALL_POSITIONS = [
    "GK", "CD", "CD-R", "CD-L", "RB", "LB", "CM", "CM-R", "CM-L",
    "CDM", "CAM", "RW", "LW", "ST", "ST-R", "ST-L",
]

# Substitution option sets (minutes)
SUB_TIME_OPTIONS = [5, 8, 10, 15]
MAX_SUBS_OPTIONS = [1, 2, 3, 4]

# Default match settings
DEFAULT_GAME_FORMAT = "9v9"
DEFAULT_FORMATION = "3-3-2"
DEFAULT_SUB_INTERVAL = 10
DEFAULT_FIRST_SUB_TIME = 10
DEFAULT_MAX_SUBS = 2
DEFAULT_SQUAD_SIZE = 11
MAX_SQUAD_SIZE = 20

# Web server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7122
DEFAULT_SQUADS_DIR = "squads"
