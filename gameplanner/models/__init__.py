"""
Models package for the Game Planner.

This package contains the core data models used throughout the application.
"""
from .player import Player, PlayerRole
from .settings import MatchSettings, MatchPeriods, PlanType
from .formation import Formation, MatchConfiguration
from .plan import (
    Plan, PlanEvent, LineupEvent, SlotAssignment, SubstitutionEvent,
    SubstitutionPair, PeriodResetEvent, MatchEndEvent
)
from .plan_report import MinutesReport, PlayerMinutesSummary

__all__ = [
    "Player", "PlayerRole", "MatchSettings", "MatchPeriods", "PlanType",
    "Formation", "MatchConfiguration", "Plan", "PlanEvent", "LineupEvent",
    "SlotAssignment", "SubstitutionEvent", "SubstitutionPair",
    "PeriodResetEvent", "MatchEndEvent", "MinutesReport", "PlayerMinutesSummary"
]
