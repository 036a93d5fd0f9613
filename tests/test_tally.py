"""Tests for the event kinds and the tally."""
import logging

import pytest

from match_recorder.models import EventKind, MatchEvent, Side, Tally


def _event(seq, kind, side, player=None):
    return MatchEvent(
        sequence_id=seq,
        recorded_at_ts=1000.0 + seq,
        elapsed_minute=0,
        elapsed_second_in_minute=seq % 60,
        kind=kind,
        side=side,
        player=player,
        description=kind.default_description,
    )


def test_event_kinds_are_in_canonical_order():
    assert [kind.value for kind in EventKind] == [
        "goal",
        "substitution",
        "red_card",
        "final_third_entry",
        "open_play_first_contact",
        "open_play_second_contact",
        "set_piece_first_contact",
        "set_piece_second_contact",
        "pass_into_seam_3",
        "attack_won",
        "attack_lost",
    ]


def test_only_goal_increments_score():
    assert [kind for kind in EventKind if kind.increments_score] == [EventKind.GOAL]


def test_default_description_replaces_every_underscore():
    assert EventKind.RED_CARD.default_description == "RED CARD"
    assert EventKind.OPEN_PLAY_FIRST_CONTACT.default_description == "OPEN PLAY FIRST CONTACT"
    assert EventKind.FINAL_THIRD_ENTRY.label == "Final 3rd Entry"


def test_parse_accepts_tags_and_rejects_unknown():
    assert EventKind.parse(" Goal ") is EventKind.GOAL
    assert Side.parse("AWAY") is Side.AWAY
    with pytest.raises(ValueError):
        EventKind.parse("yellow_card")
    with pytest.raises(ValueError):
        Side.parse("neutral")


def test_apply_counts_per_side_and_score():
    tally = Tally()
    tally.apply(_event(1, EventKind.GOAL, Side.AWAY))
    tally.apply(_event(2, EventKind.RED_CARD, Side.HOME))
    tally.apply(_event(3, EventKind.GOAL, Side.AWAY))

    assert tally.count(EventKind.GOAL, Side.AWAY) == 2
    assert tally.count(EventKind.GOAL, Side.HOME) == 0
    assert tally.count(EventKind.RED_CARD, Side.HOME) == 1
    assert tally.total(EventKind.GOAL) == 2
    assert (tally.score.home, tally.score.away) == (0, 2)


def test_revert_is_inverse_of_apply():
    tally = Tally()
    event = _event(1, EventKind.GOAL, Side.HOME)
    tally.apply(event)

    assert tally.revert(event) is True
    assert tally == Tally()


def test_revert_clamps_at_zero_and_logs_error(caplog):
    tally = Tally()
    with caplog.at_level(logging.ERROR, logger="match_recorder.models.tally"):
        consistent = tally.revert(_event(7, EventKind.GOAL, Side.HOME))

    assert consistent is False
    assert tally.count(EventKind.GOAL, Side.HOME) == 0
    assert tally.score.home == 0
    assert "underflow" in caplog.text


def test_verify_detects_drift():
    events = [_event(1, EventKind.ATTACK_WON, Side.HOME), _event(2, EventKind.GOAL, Side.AWAY)]
    tally = Tally.from_events(events)
    assert tally.verify(events)

    tally.counts[EventKind.ATTACK_WON][Side.HOME] += 1
    assert not tally.verify(events)


def test_statistics_lists_every_kind_with_home_and_opponent():
    tally = Tally()
    tally.apply(_event(1, EventKind.PASS_INTO_SEAM_3, Side.AWAY))
    stats = tally.statistics()

    assert list(stats) == [kind.value for kind in EventKind]
    assert stats["pass_into_seam_3"] == {"home": 0, "opponent": 1}
    assert stats["goal"] == {"home": 0, "opponent": 0}


def test_copy_is_independent():
    tally = Tally()
    snapshot = tally.copy()
    tally.apply(_event(1, EventKind.GOAL, Side.HOME))

    assert snapshot.score.home == 0
    assert snapshot.count(EventKind.GOAL, Side.HOME) == 0
    assert Tally.from_json(tally.to_json()) == tally
