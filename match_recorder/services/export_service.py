"""Export helpers for the Live Match Recorder.

Every export action produces two artifacts from one session snapshot: the
event timeline and the per-kind totals. Both come in a nested JSON form and
a flat CSV form with a fixed field order, so the same snapshot and export
instant always yield byte-identical output.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..models import EventKind, MatchSnapshot, Side
from ..utils import (
    EXPORT_ARTIFACTS, EXPORT_CONTENT_TYPES, UNKNOWN_PLAYER_LABEL,
    iso_date, iso_timestamp, now_ts, slugify
)

logger = logging.getLogger(__name__)

EVENTS_CSV_HEADER = [
    "Game Minute",
    "Game Second",
    "Timestamp",
    "Action Type",
    "Player",
    "Team",
    "Description",
]
TOTALS_CSV_HEADER = ["Action Type", "Home", "Opponent", "Total"]


class EmptyLedgerError(ValueError):
    """Raised when exporting a session that has no recorded events."""


@dataclass(frozen=True)
class ExportArtifact:
    """A rendered export file ready to hand to the host's save facility."""
    filename: str
    content: str
    content_type: str

    def to_bytes(self) -> bytes:
        return self.content.encode("utf-8")


# ----------------------------------------------------------------------
# Pure builders
# ----------------------------------------------------------------------
def export_session_id(snapshot: MatchSnapshot, now: float) -> str:
    return f"{slugify(snapshot.home_team_name)}_game_{int(round(now * 1000))}"


def export_filename(snapshot: MatchSnapshot, artifact: str, fmt: str, now: float) -> str:
    """
    Build the download name of one artifact.

    Example: ``home-vs-north-shore-events-2024-05-01.csv``
    """
    return (
        f"{slugify(snapshot.home_team_name)}-vs-{slugify(snapshot.opponent_name)}"
        f"-{artifact}-{iso_date(now)}.{fmt}"
    )


def build_game_info(
    snapshot: MatchSnapshot,
    session_id: str,
    now: float,
    include_duration: bool = True,
) -> Dict[str, Any]:
    info: Dict[str, Any] = {"id": session_id, "date": iso_timestamp(now)}
    if include_duration:
        info["duration"] = snapshot.elapsed_seconds
    info["teams"] = {
        "home": snapshot.home_team_name,
        "opponent": snapshot.opponent_name,
    }
    info["finalScore"] = {
        "home": snapshot.tally.score.home,
        "opponent": snapshot.tally.score.away,
    }
    return info


def build_events_document(snapshot: MatchSnapshot, session_id: str, now: float) -> Dict[str, Any]:
    """Nested timeline record: game info followed by every event, oldest first."""
    return {
        "gameInfo": build_game_info(snapshot, session_id, now),
        "actions": [
            {
                "sequenceId": event.sequence_id,
                "timestamp": iso_timestamp(event.recorded_at_ts),
                "elapsedMinute": event.elapsed_minute,
                "elapsedSecondInMinute": event.elapsed_second_in_minute,
                "kind": event.kind.value,
                "side": event.side.value,
                "team": snapshot.team_label(event.side),
                "player": event.player,
                "description": event.description,
            }
            for event in snapshot.events
        ],
    }


def build_totals_document(snapshot: MatchSnapshot, session_id: str, now: float) -> Dict[str, Any]:
    """Nested totals record: game info and home/opponent counts per kind."""
    return {
        "gameInfo": build_game_info(snapshot, session_id, now, include_duration=False),
        "statistics": snapshot.tally.statistics(),
    }


def _write_csv(rows: List[List[Any]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        writer.writerow([str(value) for value in row])
    csv_text = buffer.getvalue()
    buffer.close()
    return csv_text


def render_events_csv(snapshot: MatchSnapshot) -> str:
    rows: List[List[Any]] = [EVENTS_CSV_HEADER]
    for event in snapshot.events:
        rows.append(
            [
                event.elapsed_minute,
                event.elapsed_second_in_minute,
                iso_timestamp(event.recorded_at_ts),
                event.kind.value,
                event.player or UNKNOWN_PLAYER_LABEL,
                snapshot.team_label(event.side),
                event.description,
            ]
        )
    return _write_csv(rows)


def render_totals_csv(snapshot: MatchSnapshot) -> str:
    rows: List[List[Any]] = [TOTALS_CSV_HEADER]
    for kind in EventKind:
        home = snapshot.tally.count(kind, Side.HOME)
        away = snapshot.tally.count(kind, Side.AWAY)
        rows.append([kind.value, home, away, home + away])
    return _write_csv(rows)


# ----------------------------------------------------------------------
# Exporter
# ----------------------------------------------------------------------
class MatchExporter:
    """Renders export artifacts from a session snapshot. Never mutates state."""

    def export(
        self,
        snapshot: MatchSnapshot,
        fmt: str,
        now: Optional[float] = None,
    ) -> List[ExportArtifact]:
        """
        Render the events and totals artifacts of ``snapshot``.

        Args:
            snapshot: Frozen session copy to export
            fmt: ``"json"`` or ``"csv"``
            now: Export instant; defaults to the current time

        Returns:
            ``[events_artifact, totals_artifact]``

        Raises:
            EmptyLedgerError: If the snapshot has no events
            ValueError: If ``fmt`` is not a supported format
        """
        fmt = self._check_format(fmt)
        self._require_events(snapshot)
        now = now_ts() if now is None else now
        session_id = export_session_id(snapshot, now)

        artifacts = [
            self._render(snapshot, fmt, artifact, session_id, now)
            for artifact in EXPORT_ARTIFACTS
        ]
        logger.info(
            "Exported %s events as %s: %s",
            len(snapshot.events), fmt, ", ".join(a.filename for a in artifacts),
        )
        return artifacts

    def export_artifact(
        self,
        snapshot: MatchSnapshot,
        fmt: str,
        artifact: str,
        now: Optional[float] = None,
    ) -> ExportArtifact:
        """Render a single artifact (``"events"`` or ``"totals"``)."""
        if artifact not in EXPORT_ARTIFACTS:
            raise ValueError(f"Unknown export artifact: {artifact!r}")
        fmt = self._check_format(fmt)
        self._require_events(snapshot)
        now = now_ts() if now is None else now
        return self._render(snapshot, fmt, artifact, export_session_id(snapshot, now), now)

    def _render(
        self,
        snapshot: MatchSnapshot,
        fmt: str,
        artifact: str,
        session_id: str,
        now: float,
    ) -> ExportArtifact:
        if fmt == "json":
            if artifact == "events":
                document = build_events_document(snapshot, session_id, now)
            else:
                document = build_totals_document(snapshot, session_id, now)
            content = json.dumps(document, indent=2)
        elif artifact == "events":
            content = render_events_csv(snapshot)
        else:
            content = render_totals_csv(snapshot)

        return ExportArtifact(
            filename=export_filename(snapshot, artifact, fmt, now),
            content=content,
            content_type=EXPORT_CONTENT_TYPES[fmt],
        )

    @staticmethod
    def _check_format(fmt: str) -> str:
        normalized = (fmt or "").strip().lower()
        if normalized not in EXPORT_CONTENT_TYPES:
            raise ValueError(f"Unsupported export format: {fmt!r}")
        return normalized

    @staticmethod
    def _require_events(snapshot: MatchSnapshot) -> None:
        if not snapshot.events:
            raise EmptyLedgerError("Cannot export a match with no recorded events")
