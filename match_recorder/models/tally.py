"""
Tally model for the Live Match Recorder application.

The tally holds per-kind, per-side counters and the running score. It is
updated incrementally as events are appended to and undone from the ledger;
``from_events`` rebuilds the same figures by rescanning, which is what
``verify`` compares against.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable

from .event_kind import EventKind, Side
from .match_event import MatchEvent

logger = logging.getLogger(__name__)


def _zero_counts() -> Dict[EventKind, Dict[Side, int]]:
    return {kind: {side: 0 for side in Side} for kind in EventKind}


@dataclass
class Score:
    """Goals per side."""
    home: int = 0
    away: int = 0

    def get(self, side: Side) -> int:
        return self.home if side is Side.HOME else self.away

    def set(self, side: Side, value: int) -> None:
        if side is Side.HOME:
            self.home = value
        else:
            self.away = value


@dataclass
class Tally:
    """
    Aggregate counters derived from the ledger.

    Attributes:
        counts: Counter per event kind and side
        score: Goals per side
    """
    counts: Dict[EventKind, Dict[Side, int]] = field(default_factory=_zero_counts)
    score: Score = field(default_factory=Score)

    def count(self, kind: EventKind, side: Side) -> int:
        return self.counts[kind][side]

    def total(self, kind: EventKind) -> int:
        return sum(self.counts[kind].values())

    def apply(self, event: MatchEvent) -> None:
        """Account for a newly appended event."""
        self.counts[event.kind][event.side] += 1
        if event.kind.increments_score:
            self.score.set(event.side, self.score.get(event.side) + 1)

    def revert(self, event: MatchEvent) -> bool:
        """
        Remove an undone event from the counters.

        Counters are clamped at zero. Hitting the clamp means the tally had
        already drifted from the ledger, so it is logged as an error.

        Returns:
            True if every counter was decremented without clamping
        """
        consistent = True
        current = self.counts[event.kind][event.side]
        if current <= 0:
            logger.error(
                "Tally underflow undoing #%s: %s/%s counter already zero",
                event.sequence_id, event.kind.value, event.side.value,
            )
            consistent = False
        self.counts[event.kind][event.side] = max(0, current - 1)

        if event.kind.increments_score:
            goals = self.score.get(event.side)
            if goals <= 0:
                logger.error(
                    "Score underflow undoing #%s: %s score already zero",
                    event.sequence_id, event.side.value,
                )
                consistent = False
            self.score.set(event.side, max(0, goals - 1))
        return consistent

    @classmethod
    def from_events(cls, events: Iterable[MatchEvent]) -> "Tally":
        """Rebuild a tally by rescanning ``events`` from empty."""
        tally = cls()
        for event in events:
            tally.apply(event)
        return tally

    def verify(self, events: Iterable[MatchEvent]) -> bool:
        """Return True if this tally equals a full rescan of ``events``."""
        return self == Tally.from_events(events)

    def statistics(self) -> Dict[str, Dict[str, int]]:
        """Counters keyed by kind tag, in canonical kind order."""
        return {
            kind.value: {
                "home": self.counts[kind][Side.HOME],
                "opponent": self.counts[kind][Side.AWAY],
            }
            for kind in EventKind
        }

    def copy(self) -> "Tally":
        return Tally(
            counts={kind: dict(sides) for kind, sides in self.counts.items()},
            score=Score(home=self.score.home, away=self.score.away),
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "statistics": self.statistics(),
            "score": {"home": self.score.home, "away": self.score.away},
        }

    @staticmethod
    def from_json(data: Dict[str, Any]) -> "Tally":
        tally = Tally()
        for tag, sides in (data.get("statistics") or {}).items():
            kind = EventKind.parse(tag)
            tally.counts[kind][Side.HOME] = max(0, int(sides.get("home", 0)))
            tally.counts[kind][Side.AWAY] = max(0, int(sides.get("opponent", 0)))
        score = data.get("score") or {}
        tally.score = Score(
            home=max(0, int(score.get("home", 0))),
            away=max(0, int(score.get("away", 0))),
        )
        return tally
