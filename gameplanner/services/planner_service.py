"""
Planner service for the Game Planner.

Runs a planning request end to end: validation, minutes allocation,
rotation scheduling and rendering. Conditions that prevent a plan are
returned as messages rather than raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..models import MatchSettings, Plan, PlanType, Player
from .config_resolver import resolve_formation
from .errors import (
    ConfigurationError, InsufficientPlayersError, InvalidDurationError, PlanningError
)
from .minutes_allocator import allocate_minutes
from .plan_renderer import render_manual_plan, render_plan
from .rotation_scheduler import RotationScheduler
from .settings_validator import RosterSizeValidator, SettingsValidationService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanResult:
    """Outcome of a planning request: a plan and its text, or an error message."""
    text: str
    plan: Optional[Plan] = None
    error: Optional[PlanningError] = None

    @property
    def success(self) -> bool:
        return self.plan is not None


class PlannerService:
    """
    Produces match plans from settings and a roster.
    """

    def __init__(self, scheduler: Optional[RotationScheduler] = None,
                 validator: Optional[SettingsValidationService] = None):
        self.scheduler = scheduler or RotationScheduler()
        self.validator = validator or SettingsValidationService()

    @staticmethod
    def select_active_players(settings: MatchSettings, roster: Sequence[Player]) -> list:
        """First ``squad_size`` roster rows that hold a named player."""
        return [player for player in list(roster)[:settings.squad_size] if player.is_active]

    def build_plan(self, settings: MatchSettings, roster: Sequence[Player]) -> Plan:
        """
        Validate the request and build the plan.

        Raises:
            ConfigurationError: Unknown format/formation or invalid options
                or roster rows (duplicate ids)
            InsufficientPlayersError: Too few active players
            InvalidDurationError: Match duration is not positive
        """
        formation = resolve_formation(settings.game_format, settings.selected_formation)
        active = self.select_active_players(settings, roster)

        if not RosterSizeValidator(formation.spot_count).validate(active).is_valid:
            raise InsufficientPlayersError()

        if not self.validator.duration_validator.validate(settings).is_valid:
            raise InvalidDurationError()

        options_result = self.validator.options_validator.validate(settings)
        if not options_result.is_valid:
            raise ConfigurationError("Error: " + "; ".join(options_result.errors) + ".")

        entry_result = self.validator.entry_validator.validate(active)
        if not entry_result.is_valid:
            raise ConfigurationError("Error: " + "; ".join(entry_result.errors) + ".")

        allocated = allocate_minutes(settings, active)

        if settings.plan_type == PlanType.MANUAL:
            period_count = settings.period_count()
            return Plan(
                settings=settings,
                formation=formation,
                players=tuple(allocated),
                goalkeeper=next((p for p in allocated if p.is_goalkeeper), None),
                period_count=period_count,
                period_duration=settings.match_duration // period_count,
                substitutions_required=False,
                events=(),
            )
        return self.scheduler.schedule(settings, allocated)

    def generate_plan(self, settings: MatchSettings, roster: Sequence[Player]) -> PlanResult:
        """
        Generate a plan and its rendered text.

        Args:
            settings: Match settings
            roster: Roster rows in input order

        Returns:
            PlanResult holding the plan and text, or the error message
        """
        try:
            plan = self.build_plan(settings, roster)
        except PlanningError as e:
            logger.warning("Plan not generated: %s", e.message)
            return PlanResult(text=e.message, error=e)
        except Exception as e:
            logger.exception("Plan generation failed")
            return PlanResult(text=f"An error occurred during plan generation: {e}")

        if settings.plan_type == PlanType.MANUAL:
            text = render_manual_plan(plan)
        else:
            text = render_plan(plan)

        logger.info(
            "Generated %s plan for %s (%s): %d substitutions",
            settings.plan_type.value, settings.game_format,
            settings.selected_formation, plan.total_substitutions,
        )
        return PlanResult(text=text, plan=plan)
