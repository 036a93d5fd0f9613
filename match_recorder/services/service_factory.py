"""
Service Factory for dependency injection.

This module provides a factory for creating properly configured service
instances with their dependencies injected.
"""
from typing import Optional

from ..utils import AppConfig
from .clock_ticker import ClockTicker
from .export_service import MatchExporter
from .match_session import MatchSession
from .session_repository import SessionRepository, get_process_repository


class ServiceFactory:
    """
    Factory for creating service instances with proper dependency injection.

    The repository and exporter are created once and shared; every session
    gets its own ticker.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """Initialize factory with default configurations."""
        self.config = config or AppConfig()
        self._repository: Optional[SessionRepository] = None
        self._exporter: Optional[MatchExporter] = None

    def create_ticker(self) -> ClockTicker:
        return ClockTicker(interval=self.config.tick_interval)

    def create_match_session(self) -> MatchSession:
        """
        Create a MatchSession wired to the shared repository.

        A session left in the repository by an earlier instance is recovered.

        Returns:
            Configured MatchSession instance
        """
        return MatchSession(
            repository=self.get_repository(),
            ticker=self.create_ticker(),
            home_team_name=self.config.home_team_name,
        )

    def create_complete_service_suite(self) -> dict:
        """
        Create a complete suite of services with proper dependencies.

        Returns:
            Dictionary containing all configured services
        """
        return {
            'session': self.create_match_session(),
            'exporter': self.get_exporter(),
            'repository': self.get_repository(),
        }

    def get_repository(self) -> SessionRepository:
        """Get the session repository, defaulting to the process-wide slot."""
        if self._repository is None:
            self._repository = get_process_repository()
        return self._repository

    def get_exporter(self) -> MatchExporter:
        """Get singleton export service."""
        if self._exporter is None:
            self._exporter = MatchExporter()
        return self._exporter

    def configure_custom_repository(self, repository: SessionRepository) -> None:
        """Swap in another repository, e.g. an isolated one for tests."""
        self._repository = repository

    def configure_custom_exporter(self, exporter: MatchExporter) -> None:
        self._exporter = exporter
