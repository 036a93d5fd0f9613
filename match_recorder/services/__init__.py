"""
Services package for the Live Match Recorder.

This package contains service classes that handle business logic.
Includes factory for proper dependency injection.
"""
from .session_repository import (
    SessionRepository, InMemorySessionRepository, get_process_repository
)
from .clock_ticker import ClockTicker
from .match_session import MatchSession
from .export_service import (
    MatchExporter, ExportArtifact, EmptyLedgerError, export_filename
)
from .service_factory import ServiceFactory

__all__ = [
    "SessionRepository", "InMemorySessionRepository", "get_process_repository",
    "ClockTicker", "MatchSession", "MatchExporter", "ExportArtifact",
    "EmptyLedgerError", "export_filename", "ServiceFactory"
]
