"""Shared fixtures for the match recorder tests."""
from unittest.mock import patch

import pytest

from match_recorder.services import InMemorySessionRepository, MatchSession

KICKOFF_TS = 1_714_564_800.0  # 2024-05-01 12:00:00 UTC


class WallClock:
    """Controllable stand-in for ``now_ts``."""

    def __init__(self, start: float = KICKOFF_TS):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ManualTicker:
    """Ticker double that only fires when told to."""

    def __init__(self):
        self.callback = None
        self.starts = 0
        self.stops = 0

    @property
    def is_running(self) -> bool:
        return self.callback is not None

    def start(self, callback) -> None:
        if self.callback is None:
            self.starts += 1
        self.callback = callback

    def stop(self, wait: bool = True) -> None:
        self.callback = None
        self.stops += 1

    def fire(self) -> None:
        if self.callback is not None:
            self.callback()


@pytest.fixture
def wall_clock():
    clock = WallClock()
    with patch("match_recorder.services.match_session.now_ts", new=clock):
        yield clock


@pytest.fixture
def ticker():
    return ManualTicker()


@pytest.fixture
def repository():
    return InMemorySessionRepository()


@pytest.fixture
def session(wall_clock, ticker, repository):
    match = MatchSession(repository=repository, ticker=ticker)
    yield match
    match.close()


@pytest.fixture
def running_session(session):
    assert session.start("Wildcats")
    return session
