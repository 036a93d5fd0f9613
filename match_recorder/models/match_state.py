"""
Match phase and snapshot models for the Live Match Recorder application.

This module contains the MatchPhase lifecycle enum and the MatchSnapshot
dataclass, a frozen copy of a session taken at one instant. Snapshots are
what the exporter and the process-wide session slot work with, so readers
never observe a half-applied append or undo.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .event_kind import Side
from .ledger import EventLedger
from .match_clock import MatchClock
from .match_event import MatchEvent
from .tally import Tally
from ..utils import DEFAULT_HOME_TEAM_NAME


class MatchPhase(Enum):
    """Stage of the match lifecycle."""
    SETUP = "setup"
    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"


PHASE_STATUS_TEXT = {
    MatchPhase.SETUP: "Setup",
    MatchPhase.RUNNING: "Game Running",
    MatchPhase.PAUSED: "Game Paused",
    MatchPhase.STOPPED: "Game Stopped",
}


@dataclass(frozen=True)
class MatchSnapshot:
    """
    Frozen copy of a match session.

    Attributes:
        phase: Lifecycle phase when the snapshot was taken
        opponent_name: Name of the Away side
        home_team_name: Display name of the Home side
        elapsed_seconds: Seconds of play at ``taken_at_ts``
        clock: Copy of the session clock
        events: Ledger contents, oldest first
        tally: Copy of the counters and score
        selected_player: Ambient player for the next recorded event
        next_sequence_id: Id the next recorded event will receive
        taken_at_ts: Wall time of the snapshot (epoch seconds)
    """
    phase: MatchPhase
    opponent_name: str
    home_team_name: str
    elapsed_seconds: int
    clock: MatchClock
    events: Tuple[MatchEvent, ...] = ()
    tally: Tally = field(default_factory=Tally)
    selected_player: Optional[str] = None
    next_sequence_id: int = 1
    taken_at_ts: float = 0.0

    @property
    def score(self) -> Tuple[int, int]:
        return (self.tally.score.home, self.tally.score.away)

    def team_label(self, side: Side) -> str:
        """Resolve a side to the team name shown in exports."""
        return self.home_team_name if side is Side.HOME else self.opponent_name

    def ledger(self) -> EventLedger:
        return EventLedger(list(self.events))

    def to_json(self) -> Dict[str, Any]:
        """
        Convert the snapshot to a JSON-serializable dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "phase": self.phase.value,
            "opponent_name": self.opponent_name,
            "home_team_name": self.home_team_name,
            "elapsed_seconds": self.elapsed_seconds,
            "clock": self.clock.to_json(),
            "events": [event.to_json() for event in self.events],
            "tally": self.tally.to_json(),
            "selected_player": self.selected_player,
            "next_sequence_id": self.next_sequence_id,
            "taken_at_ts": self.taken_at_ts,
        }

    @staticmethod
    def from_json(data: Dict[str, Any]) -> "MatchSnapshot":
        """
        Create a MatchSnapshot from its dictionary form.

        Args:
            data: Dictionary produced by :meth:`to_json`

        Returns:
            New MatchSnapshot instance
        """
        events = tuple(MatchEvent.from_json(item) for item in data.get("events", []))
        highest = max((event.sequence_id for event in events), default=0)
        return MatchSnapshot(
            phase=MatchPhase(data.get("phase", MatchPhase.SETUP.value)),
            opponent_name=data.get("opponent_name", ""),
            home_team_name=data.get("home_team_name") or DEFAULT_HOME_TEAM_NAME,
            elapsed_seconds=max(0, int(data.get("elapsed_seconds", 0))),
            clock=MatchClock.from_json(data.get("clock") or {}),
            events=events,
            tally=Tally.from_json(data.get("tally") or {}),
            selected_player=data.get("selected_player"),
            next_sequence_id=max(highest + 1, int(data.get("next_sequence_id", 1))),
            taken_at_ts=float(data.get("taken_at_ts", 0.0)),
        )
