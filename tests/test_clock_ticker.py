"""Tests for the background clock tick."""
import logging
import threading

import pytest

from match_recorder.services import ClockTicker


def test_ticker_invokes_callback_until_stopped():
    ticked = threading.Event()
    calls = []

    def on_tick():
        calls.append(1)
        if len(calls) >= 3:
            ticked.set()

    ticker = ClockTicker(interval=0.01)
    ticker.start(on_tick)
    assert ticker.is_running
    assert ticked.wait(timeout=2.0)

    ticker.stop()
    assert not ticker.is_running
    count_after_stop = len(calls)
    threading.Event().wait(0.05)
    assert len(calls) == count_after_stop


def test_start_is_idempotent_while_running():
    ticker = ClockTicker(interval=0.5)
    ticker.start(lambda: None)
    thread = ticker._thread
    ticker.start(lambda: None)
    assert ticker._thread is thread
    ticker.stop()


def test_stop_without_start_is_harmless():
    ticker = ClockTicker()
    ticker.stop()
    assert not ticker.is_running


def test_failing_callback_is_logged_and_ticking_continues(caplog):
    calls = []
    done = threading.Event()

    def flaky():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("display went away")
        done.set()

    ticker = ClockTicker(interval=0.01)
    with caplog.at_level(logging.ERROR, logger="match_recorder.services.clock_ticker"):
        ticker.start(flaky)
        assert done.wait(timeout=2.0)
        ticker.stop()

    assert "Clock tick callback failed" in caplog.text


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        ClockTicker(interval=0)


def test_stop_without_wait_signals_worker():
    release = threading.Event()
    entered = threading.Event()

    def blocking_tick():
        entered.set()
        release.wait(timeout=2.0)

    ticker = ClockTicker(interval=0.01)
    ticker.start(blocking_tick)
    assert entered.wait(timeout=2.0)
    thread = ticker._thread

    ticker.stop(wait=False)
    assert not ticker.is_running
    assert thread.is_alive()

    release.set()
    thread.join(timeout=2.0)
    assert not thread.is_alive()
