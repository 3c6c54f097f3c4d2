"""
Service Factory for dependency injection.

This module provides a factory for creating service instances with their
dependencies injected.
"""
from typing import Optional

from .analytics_service import AnalyticsService, MinutesReportExporter
from .persistence_service import PersistenceService
from .planner_service import PlannerService
from .rotation_scheduler import RotationScheduler
from .settings_validator import SettingsValidationService


class ServiceFactory:
    """
    Factory for creating service instances with shared collaborators.
    """

    def __init__(self):
        """Initialize factory with default configurations."""
        self._persistence_service: Optional[PersistenceService] = None
        self._validation_service: Optional[SettingsValidationService] = None
        self._export_service: Optional[MinutesReportExporter] = None
        self._scheduler: Optional[RotationScheduler] = None

    def create_planner_service(self) -> PlannerService:
        """
        Create PlannerService with injected dependencies.

        Returns:
            Configured PlannerService instance
        """
        return PlannerService(
            scheduler=self._get_scheduler(),
            validator=self._get_validation_service(),
        )

    def create_analytics_service(self) -> AnalyticsService:
        """
        Create AnalyticsService with injected dependencies.

        Returns:
            Configured AnalyticsService instance
        """
        return AnalyticsService(export_service=self._get_export_service())

    def create_complete_service_suite(self) -> dict:
        """
        Create a complete suite of services with proper dependencies.

        Returns:
            Dictionary containing all configured services
        """
        return {
            'planner': self.create_planner_service(),
            'analytics': self.create_analytics_service(),
            'validator': self._get_validation_service(),
            'persistence': self._get_persistence_service(),
        }

    def _get_persistence_service(self) -> PersistenceService:
        """Get singleton persistence service."""
        if self._persistence_service is None:
            self._persistence_service = PersistenceService()
        return self._persistence_service

    def _get_validation_service(self) -> SettingsValidationService:
        """Get singleton validation service."""
        if self._validation_service is None:
            self._validation_service = SettingsValidationService()
        return self._validation_service

    def _get_export_service(self) -> MinutesReportExporter:
        """Get singleton export service."""
        if self._export_service is None:
            self._export_service = MinutesReportExporter()
        return self._export_service

    def _get_scheduler(self) -> RotationScheduler:
        if self._scheduler is None:
            self._scheduler = RotationScheduler()
        return self._scheduler

    def configure_custom_export_service(self, exporter: MinutesReportExporter) -> None:
        """Configure custom export service."""
        self._export_service = exporter

    def configure_custom_scheduler(self, scheduler: RotationScheduler) -> None:
        self._scheduler = scheduler
