"""
Settings validation service for match settings and rosters.

This module checks a planning request before any minutes are allocated:
option sets, format-specific rules, roster size and match duration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..models import MatchPeriods, MatchSettings, Player
from ..utils import (
    FORMATIONS, MATCH_DURATIONS, MAX_SUBS_OPTIONS, QUARTERS_FORMAT, SUB_TIME_OPTIONS
)
from ..utils.constants import MAX_SQUAD_SIZE


class ValidationResult:
    """Result of a validation operation with success status and error messages."""

    def __init__(self, is_valid: bool = True, errors: Optional[List[str]] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: str) -> None:
        """Add an error message and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False

    def combine(self, other: 'ValidationResult') -> 'ValidationResult':
        """Combine with another validation result."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors
        )


class ValidationRule(ABC):
    """Abstract base class for validation rules."""

    @abstractmethod
    def validate(self, *args, **kwargs) -> ValidationResult:
        """Perform validation and return result."""
        pass


class SettingsOptionsValidator(ValidationRule):
    """Validates settings against the supported option sets."""

    def validate(self, settings: MatchSettings) -> ValidationResult:
        result = ValidationResult()

        if settings.game_format not in FORMATIONS:
            result.add_error(f"Unknown game format: {settings.game_format}")
        else:
            if settings.selected_formation not in FORMATIONS[settings.game_format]:
                result.add_error(
                    f"Formation {settings.selected_formation} is not available for {settings.game_format}"
                )
            expected = MATCH_DURATIONS[settings.game_format]
            if settings.match_duration > 0 and settings.match_duration != expected:
                result.add_error(
                    f"Match duration for {settings.game_format} is fixed at {expected} minutes"
                )

        if settings.sub_interval not in SUB_TIME_OPTIONS:
            result.add_error(f"Substitution interval must be one of {SUB_TIME_OPTIONS}")
        if settings.first_sub_time not in SUB_TIME_OPTIONS:
            result.add_error(f"First substitution time must be one of {SUB_TIME_OPTIONS}")
        if settings.max_subs not in MAX_SUBS_OPTIONS:
            result.add_error(f"Maximum substitutions must be one of {MAX_SUBS_OPTIONS}")

        if settings.match_periods == MatchPeriods.QUARTERS and settings.game_format != QUARTERS_FORMAT:
            result.add_error(f"Quarters are only available for {QUARTERS_FORMAT}")

        if not 1 <= settings.squad_size <= MAX_SQUAD_SIZE:
            result.add_error(f"Squad size must be between 1 and {MAX_SQUAD_SIZE}")

        return result


class RosterSizeValidator(ValidationRule):
    """Validates that the active roster can fill every outfield spot plus a goalkeeper."""

    def __init__(self, spot_count: int):
        self.spot_count = spot_count

    def validate(self, active_players: Sequence[Player]) -> ValidationResult:
        result = ValidationResult()
        if len(active_players) < self.spot_count + 1:
            result.add_error("Error: Not enough players to fill the formation spots.")
        return result


class DurationValidator(ValidationRule):
    """Validates the match duration."""

    def validate(self, settings: MatchSettings) -> ValidationResult:
        result = ValidationResult()
        if not settings.match_duration or settings.match_duration <= 0:
            result.add_error("Error: Match duration must be greater than zero.")
        return result


class RosterEntryValidator(ValidationRule):
    """Validates individual roster rows: unique ids and sane overrides."""

    def validate(self, roster: Sequence[Player]) -> ValidationResult:
        result = ValidationResult()
        seen = set()
        for index, player in enumerate(roster, start=1):
            if player.id in seen:
                result.add_error(f"Row {index}: duplicate player id '{player.id}'")
            seen.add(player.id)
            if player.manual_minutes is not None and player.manual_minutes < 0:
                result.add_error(f"Row {index}: manual minutes cannot be negative")
        return result


class SettingsValidationService:
    """
    Orchestrates the validation rules for a planning request.
    """

    def __init__(self):
        self.options_validator = SettingsOptionsValidator()
        self.duration_validator = DurationValidator()
        self.entry_validator = RosterEntryValidator()

    def validate_settings(self, settings: MatchSettings) -> ValidationResult:
        """Validate option sets and duration."""
        result = self.options_validator.validate(settings)
        return result.combine(self.duration_validator.validate(settings))

    def validate_roster(self, roster: Sequence[Player], spot_count: int) -> ValidationResult:
        """
        Validate roster rows and the number of active players.

        Args:
            roster: Roster rows considered for the match
            spot_count: Outfield spots of the selected formation

        Returns:
            ValidationResult for the roster
        """
        result = self.entry_validator.validate(roster)
        active = [player for player in roster if player.is_active]
        return result.combine(RosterSizeValidator(spot_count).validate(active))

    def validate_request(self, settings: MatchSettings, roster: Sequence[Player],
                         spot_count: int) -> ValidationResult:
        """Validate a full planning request."""
        return self.validate_settings(settings).combine(self.validate_roster(roster, spot_count))
