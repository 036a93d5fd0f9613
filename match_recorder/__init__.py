"""
Live Match Recorder

An application for recording a single soccer match live: a running match
clock, one-tap event tagging for either side with undo, and JSON/CSV export
of the event timeline and per-event totals.
"""
from .models import EventKind, Side, MatchEvent, MatchPhase, MatchSnapshot, Tally
from .services import MatchSession, MatchExporter, InMemorySessionRepository
from .utils import fmt_mmss, now_ts, APP_TITLE

__version__ = "1.0.0"

__all__ = [
    "EventKind", "Side", "MatchEvent", "MatchPhase", "MatchSnapshot", "Tally",
    "MatchSession", "MatchExporter", "InMemorySessionRepository",
    "fmt_mmss", "now_ts", "APP_TITLE"
]
