"""
Utilities package for the Game Planner.

This package contains the static reference data and helper functions used
throughout the application.
"""
from .time_utils import fmt_mmss, fmt_match_minute, now_ts
from .constants import (
    APP_TITLE, MATCH_DURATIONS, GAME_FORMATS, FORMATIONS, OUTFIELD_SPOTS,
    ALL_POSITIONS, SUB_TIME_OPTIONS, MAX_SUBS_OPTIONS, QUARTERS_FORMAT
)

__all__ = [
    "fmt_mmss", "fmt_match_minute", "now_ts", "APP_TITLE", "MATCH_DURATIONS",
    "GAME_FORMATS", "FORMATIONS", "OUTFIELD_SPOTS", "ALL_POSITIONS",
    "SUB_TIME_OPTIONS", "MAX_SUBS_OPTIONS", "QUARTERS_FORMAT"
]
