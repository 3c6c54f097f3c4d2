"""
Match settings model for the Game Planner application.

This module contains the MatchSettings dataclass describing the game
format, formation and substitution frequency for a single match.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict

from ..utils import MATCH_DURATIONS, FORMATIONS, QUARTERS_FORMAT
from ..utils.constants import (
    DEFAULT_GAME_FORMAT, DEFAULT_FORMATION, DEFAULT_SUB_INTERVAL,
    DEFAULT_FIRST_SUB_TIME, DEFAULT_MAX_SUBS, DEFAULT_SQUAD_SIZE
)


class MatchPeriods(Enum):
    """How the match is split."""
    HALVES = "Halves"
    QUARTERS = "Quarters"


class PlanType(Enum):
    """Automatic rotation or a manual (starters only) plan."""
    AUTOMATIC = "Automatic"
    MANUAL = "Manual"


@dataclass(frozen=True)
class MatchSettings:
    """
    Settings for a single planning request.

    Attributes:
        game_format: One of 5v5, 7v7, 9v9, 11v11
        match_duration: Match length in minutes (derived from the format)
        selected_formation: Formation name valid for the game format
        is_permanent_gk: Whether one goalkeeper plays the whole match
        sub_interval: Minutes between substitution windows
        first_sub_time: Minutes into each period of the first window
        max_subs: Substitutions allowed per window
        match_periods: Halves, or Quarters (5v5 only)
        squad_size: Number of roster rows considered for the match
        plan_type: Automatic rotation or manual starters plan
    """
    game_format: str = DEFAULT_GAME_FORMAT
    match_duration: int = MATCH_DURATIONS[DEFAULT_GAME_FORMAT]
    selected_formation: str = DEFAULT_FORMATION
    is_permanent_gk: bool = True
    sub_interval: int = DEFAULT_SUB_INTERVAL
    first_sub_time: int = DEFAULT_FIRST_SUB_TIME
    max_subs: int = DEFAULT_MAX_SUBS
    match_periods: MatchPeriods = MatchPeriods.HALVES
    squad_size: int = DEFAULT_SQUAD_SIZE
    plan_type: PlanType = PlanType.AUTOMATIC

    @classmethod
    def default(cls) -> 'MatchSettings':
        """Settings a new planner session starts with."""
        return cls()

    def with_format(self, game_format: str) -> 'MatchSettings':
        """
        Return settings switched to another game format.

        The duration follows the format, the formation resets to the first
        one listed for the format and quarters are kept only for 5v5.

        Raises:
            ValueError: If the format is unknown
        """
        if game_format not in MATCH_DURATIONS:
            raise ValueError(f"Unknown game format: {game_format}")
        periods = self.match_periods if game_format == QUARTERS_FORMAT else MatchPeriods.HALVES
        return replace(
            self,
            game_format=game_format,
            match_duration=MATCH_DURATIONS[game_format],
            selected_formation=next(iter(FORMATIONS[game_format])),
            match_periods=periods,
        )

    def period_count(self) -> int:
        """Four quarters for the smallest format when requested, else two halves."""
        if self.game_format == QUARTERS_FORMAT and self.match_periods == MatchPeriods.QUARTERS:
            return 4
        return 2

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "game_format": self.game_format,
            "match_duration": self.match_duration,
            "selected_formation": self.selected_formation,
            "is_permanent_gk": self.is_permanent_gk,
            "sub_interval": self.sub_interval,
            "first_sub_time": self.first_sub_time,
            "max_subs": self.max_subs,
            "match_periods": self.match_periods.value,
            "squad_size": self.squad_size,
            "plan_type": self.plan_type.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MatchSettings':
        """
        Create settings from a dictionary.

        Missing keys fall back to the defaults; a missing duration follows
        the game format. camelCase keys are accepted as well.
        """
        def get(key: str, camel: str, default: Any) -> Any:
            if key in data:
                return data[key]
            return data.get(camel, default)

        defaults = cls()
        game_format = get("game_format", "gameFormat", defaults.game_format)
        duration = get("match_duration", "matchDuration", None)
        if duration is None:
            duration = MATCH_DURATIONS.get(game_format, 0)

        return cls(
            game_format=game_format,
            match_duration=int(duration),
            selected_formation=get("selected_formation", "selectedFormation", defaults.selected_formation),
            is_permanent_gk=bool(get("is_permanent_gk", "isPermanentGK", defaults.is_permanent_gk)),
            sub_interval=int(get("sub_interval", "subInterval", defaults.sub_interval)),
            first_sub_time=int(get("first_sub_time", "firstSubTime", defaults.first_sub_time)),
            max_subs=int(get("max_subs", "maxSubs", defaults.max_subs)),
            match_periods=MatchPeriods(get("match_periods", "matchPeriods", defaults.match_periods.value)),
            squad_size=int(get("squad_size", "squadSize", defaults.squad_size)),
            plan_type=PlanType(get("plan_type", "planType", defaults.plan_type.value)),
        )
