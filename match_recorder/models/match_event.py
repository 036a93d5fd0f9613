"""
MatchEvent model for the Live Match Recorder application.

A MatchEvent is one tagged moment in the ledger. Events are immutable; the
only way one leaves the ledger is an undo of the most recent append.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .event_kind import EventKind, Side


@dataclass(frozen=True)
class MatchEvent:
    """
    A recorded in-game event.

    Attributes:
        sequence_id: Assignment-order key, unique within a session
        recorded_at_ts: Wall time of recording (epoch seconds)
        elapsed_minute: Whole minutes of play at recording
        elapsed_second_in_minute: Seconds past ``elapsed_minute`` (0-59)
        kind: Event category
        side: Team the event is credited to
        player: Player name, if one was given
        description: Free-text description
    """
    sequence_id: int
    recorded_at_ts: float
    elapsed_minute: int
    elapsed_second_in_minute: int
    kind: EventKind
    side: Side
    player: Optional[str]
    description: str

    @property
    def elapsed_seconds(self) -> int:
        return self.elapsed_minute * 60 + self.elapsed_second_in_minute

    def to_json(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "sequence_id": self.sequence_id,
            "recorded_at_ts": self.recorded_at_ts,
            "elapsed_minute": self.elapsed_minute,
            "elapsed_second_in_minute": self.elapsed_second_in_minute,
            "kind": self.kind.value,
            "side": self.side.value,
            "player": self.player,
            "description": self.description,
        }

    @staticmethod
    def from_json(data: Dict[str, Any]) -> "MatchEvent":
        """Create a MatchEvent from its dictionary form."""
        return MatchEvent(
            sequence_id=int(data["sequence_id"]),
            recorded_at_ts=float(data["recorded_at_ts"]),
            elapsed_minute=int(data["elapsed_minute"]),
            elapsed_second_in_minute=int(data["elapsed_second_in_minute"]),
            kind=EventKind.parse(data["kind"]),
            side=Side.parse(data["side"]),
            player=data.get("player"),
            description=data.get("description", ""),
        )
