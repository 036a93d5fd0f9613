"""
Session repository for the Live Match Recorder application.

The live session is mirrored into a process-lifetime slot after every change
so that a UI remount can pick it up again. Nothing is written to durable
storage; the repository is injected so tests (or a real persistence layer)
can replace it.
"""
import logging
from typing import Optional, Protocol

from ..models import MatchSnapshot

logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Storage slot for the current session snapshot."""

    def load(self) -> Optional[MatchSnapshot]:
        """Return the stored snapshot, if any."""
        ...

    def save(self, snapshot: MatchSnapshot) -> None:
        """Replace the stored snapshot."""
        ...

    def clear(self) -> None:
        """Drop the stored snapshot."""
        ...


class InMemorySessionRepository:
    """Holds a single snapshot for the lifetime of the process."""

    def __init__(self) -> None:
        self._snapshot: Optional[MatchSnapshot] = None

    def load(self) -> Optional[MatchSnapshot]:
        return self._snapshot

    def save(self, snapshot: MatchSnapshot) -> None:
        self._snapshot = snapshot

    def clear(self) -> None:
        if self._snapshot is not None:
            logger.debug("Clearing stored session snapshot")
        self._snapshot = None


_process_repository: Optional[InMemorySessionRepository] = None


def get_process_repository() -> InMemorySessionRepository:
    """Return the repository shared by everything in this process."""
    global _process_repository
    if _process_repository is None:
        _process_repository = InMemorySessionRepository()
    return _process_repository
