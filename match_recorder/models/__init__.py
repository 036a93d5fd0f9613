"""
Models package for the Live Match Recorder.

This package contains the core data models used throughout the application.
"""
from .event_kind import EventKind, Side, KIND_LABELS
from .match_event import MatchEvent
from .match_clock import MatchClock
from .ledger import EventLedger
from .tally import Tally, Score
from .match_state import MatchPhase, MatchSnapshot, PHASE_STATUS_TEXT

__all__ = [
    "EventKind", "Side", "KIND_LABELS", "MatchEvent", "MatchClock",
    "EventLedger", "Tally", "Score", "MatchPhase", "MatchSnapshot",
    "PHASE_STATUS_TEXT"
]
