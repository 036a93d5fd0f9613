"""Tests for JSON and CSV export of a recorded match."""
import csv
import io
import json

import pytest

from match_recorder.models import EventKind, MatchPhase, Side
from match_recorder.services import EmptyLedgerError, MatchExporter, export_filename

EXPORT_TS = 1_714_568_400.5  # 2024-05-01T13:00:00.500Z


@pytest.fixture
def exporter():
    return MatchExporter()


@pytest.fixture
def recorded_snapshot(session, wall_clock):
    session.start("North  Shore United")
    wall_clock.advance(75)
    session.record_event(EventKind.GOAL, Side.AWAY, player="Zoe")
    wall_clock.advance(10)
    session.record_event(EventKind.RED_CARD, Side.HOME, description="Second booking")
    return session.snapshot()


def test_totals_csv_rows(exporter, recorded_snapshot):
    events_file, totals_file = exporter.export(recorded_snapshot, "csv", now=EXPORT_TS)
    lines = totals_file.content.splitlines()

    assert lines[0] == '"Action Type","Home","Opponent","Total"'
    assert '"goal","0","1","1"' in lines
    assert '"red_card","1","0","1"' in lines
    assert '"attack_lost","0","0","0"' in lines
    assert [row.split(",")[0].strip('"') for row in lines[1:]] == [k.value for k in EventKind]


def test_events_csv_rows(exporter, recorded_snapshot):
    events_file = exporter.export_artifact(recorded_snapshot, "csv", "events", now=EXPORT_TS)
    lines = events_file.content.splitlines()

    assert lines[0] == (
        '"Game Minute","Game Second","Timestamp","Action Type","Player","Team","Description"'
    )
    rows = list(csv.reader(io.StringIO(events_file.content)))
    assert rows[1] == [
        "1", "15", "2024-05-01T12:01:15.000Z", "goal", "Zoe", "North  Shore United", "GOAL",
    ]
    assert rows[2] == [
        "1", "25", "2024-05-01T12:01:25.000Z", "red_card", "Unknown", "Home", "Second booking",
    ]
    assert all(line.startswith('"') and line.endswith('"') for line in lines)


def test_events_json_document(exporter, recorded_snapshot):
    events_file, _ = exporter.export(recorded_snapshot, "json", now=EXPORT_TS)
    document = json.loads(events_file.content)

    assert list(document) == ["gameInfo", "actions"]
    info = document["gameInfo"]
    assert info == {
        "id": "home_game_1714568400500",
        "date": "2024-05-01T13:00:00.500Z",
        "duration": 85,
        "teams": {"home": "Home", "opponent": "North  Shore United"},
        "finalScore": {"home": 0, "opponent": 1},
    }
    assert document["actions"][0] == {
        "sequenceId": 1,
        "timestamp": "2024-05-01T12:01:15.000Z",
        "elapsedMinute": 1,
        "elapsedSecondInMinute": 15,
        "kind": "goal",
        "side": "away",
        "team": "North  Shore United",
        "player": "Zoe",
        "description": "GOAL",
    }
    assert document["actions"][1]["player"] is None
    assert document["actions"][1]["team"] == "Home"
    assert [a["sequenceId"] for a in document["actions"]] == [1, 2]


def test_totals_json_document(exporter, recorded_snapshot):
    _, totals_file = exporter.export(recorded_snapshot, "json", now=EXPORT_TS)
    document = json.loads(totals_file.content)

    assert "duration" not in document["gameInfo"]
    assert document["gameInfo"]["id"] == "home_game_1714568400500"
    assert list(document["statistics"]) == [k.value for k in EventKind]
    assert document["statistics"]["goal"] == {"home": 0, "opponent": 1}
    assert document["statistics"]["red_card"] == {"home": 1, "opponent": 0}


def test_file_names(exporter, recorded_snapshot):
    for fmt in ("json", "csv"):
        names = [a.filename for a in exporter.export(recorded_snapshot, fmt, now=EXPORT_TS)]
        assert names == [
            f"home-vs-north-shore-united-events-2024-05-01.{fmt}",
            f"home-vs-north-shore-united-totals-2024-05-01.{fmt}",
        ]
    assert export_filename(recorded_snapshot, "totals", "csv", EXPORT_TS).endswith("totals-2024-05-01.csv")


def test_content_types(exporter, recorded_snapshot):
    assert {a.content_type for a in exporter.export(recorded_snapshot, "json", now=EXPORT_TS)} == {"application/json"}
    assert {a.content_type for a in exporter.export(recorded_snapshot, "CSV", now=EXPORT_TS)} == {"text/csv"}


def test_export_is_deterministic(exporter, recorded_snapshot):
    first = exporter.export(recorded_snapshot, "json", now=EXPORT_TS)
    second = exporter.export(recorded_snapshot, "json", now=EXPORT_TS)
    assert first == second


def test_export_reads_frozen_snapshot(exporter, session, wall_clock):
    session.start("Wildcats")
    session.record_event(EventKind.GOAL, Side.HOME)
    snapshot = session.snapshot()
    session.record_event(EventKind.GOAL, Side.HOME)

    _, totals = exporter.export(snapshot, "csv", now=EXPORT_TS)
    assert '"goal","1","0","1"' in totals.content.splitlines()


@pytest.mark.parametrize("stop_first", [False, True])
def test_empty_ledger_rejected_in_any_phase(exporter, session, stop_first):
    with pytest.raises(EmptyLedgerError):
        exporter.export(session.snapshot(), "json", now=EXPORT_TS)

    session.start("Wildcats")
    if stop_first:
        session.stop()
    with pytest.raises(EmptyLedgerError):
        exporter.export(session.snapshot(), "csv", now=EXPORT_TS)


def test_empty_ledger_after_undo_rejected(exporter, running_session):
    running_session.record_event(EventKind.GOAL, Side.HOME)
    running_session.undo_last()
    assert running_session.phase is MatchPhase.RUNNING
    with pytest.raises(EmptyLedgerError):
        exporter.export(running_session.snapshot(), "csv")


def test_unknown_format_and_artifact(exporter, recorded_snapshot):
    with pytest.raises(ValueError):
        exporter.export(recorded_snapshot, "xml")
    with pytest.raises(ValueError):
        exporter.export_artifact(recorded_snapshot, "csv", "summary")
