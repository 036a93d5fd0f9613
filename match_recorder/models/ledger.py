"""Ordered event log with undo of the most recent append."""
from typing import Iterator, List, Optional, Tuple

from .match_event import MatchEvent


class EventLedger:
    """Append-only sequence of match events, except for removing the last one."""

    def __init__(self, events: Optional[List[MatchEvent]] = None):
        self._events: List[MatchEvent] = list(events or [])

    def append(self, event: MatchEvent) -> None:
        self._events.append(event)

    def pop_last(self) -> Optional[MatchEvent]:
        """Remove and return the most recent event, or None when empty."""
        if not self._events:
            return None
        return self._events.pop()

    def events(self) -> Tuple[MatchEvent, ...]:
        """Immutable copy of the events, oldest first."""
        return tuple(self._events)

    def recent(self, limit: int) -> List[MatchEvent]:
        """Up to ``limit`` events, newest first."""
        if limit <= 0:
            return []
        return list(reversed(self._events[-limit:]))

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[MatchEvent]:
        return iter(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)
