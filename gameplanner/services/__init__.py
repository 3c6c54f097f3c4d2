"""
Services package for the Game Planner.

This package contains the planning pipeline (configuration resolver,
minutes allocator, rotation scheduler, plan renderer) and the services
built around it.
"""
from .errors import (
    PlanningError, InsufficientPlayersError, InvalidDurationError, ConfigurationError
)
from .config_resolver import (
    resolve_configuration, resolve_formation, formations_for, default_formation, outfield_spots
)
from .minutes_allocator import allocate_minutes
from .rotation_scheduler import RotationScheduler, RotationState, schedule_rotation
from .plan_renderer import render_plan, render_manual_plan
from .settings_validator import SettingsValidationService, ValidationResult
from .planner_service import PlannerService, PlanResult
from .analytics_service import AnalyticsService, MinutesReportExporter, scheduled_minutes
from .persistence_service import PersistenceService
from .service_factory import ServiceFactory

__all__ = [
    "PlanningError", "InsufficientPlayersError", "InvalidDurationError",
    "ConfigurationError", "resolve_configuration", "resolve_formation",
    "formations_for", "default_formation", "outfield_spots", "allocate_minutes",
    "RotationScheduler", "RotationState", "schedule_rotation", "render_plan",
    "render_manual_plan", "SettingsValidationService", "ValidationResult",
    "PlannerService", "PlanResult", "AnalyticsService", "MinutesReportExporter",
    "scheduled_minutes",
    "PersistenceService", "ServiceFactory"
]
