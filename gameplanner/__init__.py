"""
Game Planner

Allocates fair playing time across a youth-football roster and builds a
minute-by-minute substitution plan for a match, given a game format, a
formation and substitution-frequency settings.

This package provides the planning services and a Flask web API around them.
"""
from .models import Player, PlayerRole, MatchSettings, Plan
from .services import PlannerService, PlanResult, allocate_minutes, schedule_rotation, render_plan
from .ui import create_app, run_web_app
from .utils import fmt_mmss, APP_TITLE

__version__ = "1.0.0"

__all__ = [
    "Player", "PlayerRole", "MatchSettings", "Plan", "PlannerService", "PlanResult",
    "allocate_minutes", "schedule_rotation", "render_plan",
    "create_app", "run_web_app", "fmt_mmss", "APP_TITLE"
]
