"""
Match clock for the Live Match Recorder application.

The clock turns wall-clock instants into seconds of play. While running,
elapsed time is recomputed on demand from an anchor; while paused or stopped
it is frozen. Resuming rewrites the anchor so that ``now - anchor`` equals
the frozen value, which keeps elapsed time continuous across a pause without
accumulating paused durations.

Instants are passed in as epoch seconds but held as integer milliseconds, so
re-anchoring on resume is exact.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


def _to_ms(ts: float) -> int:
    return int(round(ts * 1000))


@dataclass
class MatchClock:
    """
    Elapsed-time tracker for one match.

    Attributes:
        anchor_ms: Wall time (epoch ms) corresponding to elapsed=0 for the
            running segment
        last_elapsed_seconds: Value frozen by the last pause or stop
        running: Whether elapsed time is currently advancing
        stopped: Whether the clock has been stopped for good
    """
    anchor_ms: Optional[int] = None
    last_elapsed_seconds: int = 0
    running: bool = False
    stopped: bool = False

    def start(self, now: float) -> None:
        """Anchor elapsed=0 at ``now`` and begin advancing."""
        self.anchor_ms = _to_ms(now)
        self.last_elapsed_seconds = 0
        self.running = True
        self.stopped = False

    def elapsed_seconds(self, now: float) -> int:
        """Whole seconds of play at ``now``; never negative."""
        if not self.running or self.anchor_ms is None:
            return self.last_elapsed_seconds
        # Clock skew can put ``now`` slightly before the anchor
        return max(0, (_to_ms(now) - self.anchor_ms) // 1000)

    def pause(self, now: float) -> None:
        if not self.running:
            return
        self.last_elapsed_seconds = self.elapsed_seconds(now)
        self.running = False

    def resume(self, now: float) -> None:
        if self.running or self.stopped or self.anchor_ms is None:
            return
        self.anchor_ms = _to_ms(now) - self.last_elapsed_seconds * 1000
        self.running = True

    def stop(self, now: float) -> None:
        """Freeze the current value as final."""
        if self.running:
            self.last_elapsed_seconds = self.elapsed_seconds(now)
        self.running = False
        self.stopped = True

    def copy(self) -> "MatchClock":
        return MatchClock(
            anchor_ms=self.anchor_ms,
            last_elapsed_seconds=self.last_elapsed_seconds,
            running=self.running,
            stopped=self.stopped,
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "anchor_ms": self.anchor_ms,
            "last_elapsed_seconds": self.last_elapsed_seconds,
            "running": self.running,
            "stopped": self.stopped,
        }

    @staticmethod
    def from_json(data: Dict[str, Any]) -> "MatchClock":
        anchor = data.get("anchor_ms")
        return MatchClock(
            anchor_ms=int(anchor) if anchor is not None else None,
            last_elapsed_seconds=max(0, int(data.get("last_elapsed_seconds", 0))),
            running=bool(data.get("running", False)),
            stopped=bool(data.get("stopped", False)),
        )
