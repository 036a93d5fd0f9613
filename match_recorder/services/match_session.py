"""
Match session service for the Live Match Recorder application.

MatchSession is the state machine that drives a single recorded match:

    setup -> running <-> paused -> stopped, and reset back to setup

Guards never raise. A transition whose precondition does not hold simply
does not happen and the method returns False (or None for the recording
operations). The ledger and the tally are always mutated together under one
lock, and a frozen snapshot is mirrored into the session repository after
every change. The ticker is started and stopped under that same lock, so
it always follows the phase.
"""
import logging
import threading
from typing import Callable, List, Optional, Tuple

from ..models import (
    EventKind, EventLedger, MatchClock, MatchEvent, MatchPhase,
    MatchSnapshot, PHASE_STATUS_TEXT, Side, Tally
)
from ..utils import (
    DEFAULT_HOME_TEAM_NAME, RECENT_EVENTS_LIMIT, clean_optional, now_ts
)
from .clock_ticker import ClockTicker
from .session_repository import InMemorySessionRepository, SessionRepository

logger = logging.getLogger(__name__)

TickListener = Callable[[int], None]


class MatchSession:
    """
    Orchestrates the clock, ledger and tally through the match lifecycle.

    Uses dependency injection for the repository and the ticker so both can
    be swapped out in tests.
    """

    def __init__(
        self,
        repository: Optional[SessionRepository] = None,
        ticker: Optional[ClockTicker] = None,
        home_team_name: str = DEFAULT_HOME_TEAM_NAME,
    ) -> None:
        self._lock = threading.RLock()
        self.repository = repository if repository is not None else InMemorySessionRepository()
        self.ticker = ticker if ticker is not None else ClockTicker()
        self.home_team_name = clean_optional(home_team_name) or DEFAULT_HOME_TEAM_NAME
        self._listeners: List[TickListener] = []
        self._reinitialize()

        stored = self.repository.load()
        if stored is not None:
            self._restore(stored)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def phase(self) -> MatchPhase:
        return self._phase

    @property
    def opponent_name(self) -> str:
        return self._opponent_name

    @property
    def selected_player(self) -> Optional[str]:
        return self._selected_player

    @property
    def clock(self) -> MatchClock:
        return self._clock

    @property
    def ledger(self) -> EventLedger:
        """Live ledger; callers must not mutate it."""
        return self._ledger

    @property
    def tally(self) -> Tally:
        """Live tally; callers must not mutate it."""
        return self._tally

    @property
    def score(self) -> Tuple[int, int]:
        with self._lock:
            return (self._tally.score.home, self._tally.score.away)

    @property
    def total_events(self) -> int:
        return len(self._ledger)

    @property
    def can_export(self) -> bool:
        return len(self._ledger) > 0

    def elapsed_seconds(self) -> int:
        """Seconds of play right now."""
        with self._lock:
            return self._clock.elapsed_seconds(now_ts())

    def recent_events(self, limit: int = RECENT_EVENTS_LIMIT) -> List[MatchEvent]:
        """Most recent events, newest first."""
        with self._lock:
            return self._ledger.recent(limit)

    def status_text(self) -> str:
        return PHASE_STATUS_TEXT[self._phase]

    def snapshot(self) -> MatchSnapshot:
        """Take a frozen copy of the whole session."""
        with self._lock:
            return self._snapshot_locked(now_ts())

    # ------------------------------------------------------------------
    # Lifecycle transitions
    # ------------------------------------------------------------------
    def start(self, opponent_name: str) -> bool:
        """
        Start the match clock against ``opponent_name``.

        Returns:
            False if the name is blank or the match is not in setup
        """
        name = clean_optional(opponent_name)
        with self._lock:
            if name is None:
                logger.debug("Start rejected: opponent name is blank")
                return False
            if self._phase is not MatchPhase.SETUP:
                logger.debug("Start ignored in phase %s", self._phase.value)
                return False

            now = now_ts()
            self._clock = MatchClock()
            self._clock.start(now)
            self._opponent_name = name
            self._phase = MatchPhase.RUNNING
            self._persist(now)
            self._start_ticker_locked(now)

        logger.info("Match started against %s", name)
        return True

    def pause(self) -> bool:
        with self._lock:
            if self._phase is not MatchPhase.RUNNING:
                logger.debug("Pause ignored in phase %s", self._phase.value)
                return False
            now = now_ts()
            self._clock.pause(now)
            self._phase = MatchPhase.PAUSED
            self._persist(now)
            self.ticker.stop(wait=False)
            elapsed = self._clock.last_elapsed_seconds

        logger.info("Match paused at %ss", elapsed)
        return True

    def resume(self) -> bool:
        with self._lock:
            if self._phase is not MatchPhase.PAUSED:
                logger.debug("Resume ignored in phase %s", self._phase.value)
                return False
            now = now_ts()
            self._clock.resume(now)
            self._phase = MatchPhase.RUNNING
            self._persist(now)
            self._start_ticker_locked(now)
            elapsed = self._clock.elapsed_seconds(now)

        logger.info("Match resumed at %ss", elapsed)
        return True

    def stop(self) -> bool:
        """Freeze the clock for good. Allowed from any phase."""
        with self._lock:
            now = now_ts()
            self._clock.stop(now)
            self._phase = MatchPhase.STOPPED
            self._persist(now)
            self.ticker.stop(wait=False)
            elapsed = self._clock.last_elapsed_seconds

        logger.info("Match stopped at %ss", elapsed)
        return True

    def reset(self) -> bool:
        """Discard the clock, ledger and tally and return to setup."""
        with self._lock:
            self.ticker.stop(wait=False)
            self._reinitialize()
            self.repository.clear()
        logger.info("Match reset")
        return True

    def close(self) -> None:
        """Teardown: stop the periodic tick."""
        self.ticker.stop()

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------
    def select_player(self, player: Optional[str]) -> None:
        """Set the player applied to events recorded without an explicit one."""
        with self._lock:
            self._selected_player = clean_optional(player)
            if self._phase is not MatchPhase.SETUP:
                self._persist(now_ts())

    def record_event(
        self,
        kind,
        side,
        player: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Optional[MatchEvent]:
        """
        Append an event stamped with the current elapsed time.

        Args:
            kind: EventKind or its tag string
            side: Side or its tag string
            player: Player name; defaults to the selected player
            description: Free text; defaults to the kind's description

        Returns:
            The recorded event, or None when the match is not running

        Raises:
            ValueError: If ``kind`` or ``side`` is not a known tag
        """
        event_kind = EventKind.parse(kind)
        event_side = Side.parse(side)

        with self._lock:
            if self._phase is not MatchPhase.RUNNING:
                logger.debug(
                    "Ignoring %s for %s in phase %s",
                    event_kind.value, event_side.value, self._phase.value,
                )
                return None

            now = now_ts()
            minute, second = divmod(self._clock.elapsed_seconds(now), 60)
            event = MatchEvent(
                sequence_id=self._next_sequence_id,
                recorded_at_ts=now,
                elapsed_minute=minute,
                elapsed_second_in_minute=second,
                kind=event_kind,
                side=event_side,
                player=clean_optional(player) or self._selected_player,
                description=clean_optional(description) or event_kind.default_description,
            )
            self._ledger.append(event)
            self._tally.apply(event)
            self._next_sequence_id += 1
            self._persist(now)

        logger.info(
            "Recorded #%s %s for %s at %s:%02d",
            event.sequence_id, event_kind.value, event_side.value, minute, second,
        )
        return event

    def undo_last(self) -> Optional[MatchEvent]:
        """
        Remove the most recently recorded event.

        Returns:
            The removed event, or None when the ledger is empty
        """
        with self._lock:
            event = self._ledger.pop_last()
            if event is None:
                logger.debug("Undo ignored: ledger is empty")
                return None
            self._tally.revert(event)
            self._persist(now_ts())

        logger.info("Undid #%s %s for %s", event.sequence_id, event.kind.value, event.side.value)
        return event

    # ------------------------------------------------------------------
    # Tick publishing
    # ------------------------------------------------------------------
    def subscribe(self, listener: TickListener) -> None:
        """Register a callable receiving the elapsed seconds on every tick."""
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def unsubscribe(self, listener: TickListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def publish_tick(self) -> None:
        """Recompute elapsed time and hand it to every listener."""
        with self._lock:
            if self._phase is not MatchPhase.RUNNING:
                return
            elapsed = self._clock.elapsed_seconds(now_ts())
            self.last_published_elapsed = elapsed
            listeners = list(self._listeners)

        for listener in listeners:
            listener(elapsed)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _start_ticker_locked(self, now: float) -> None:
        self.last_published_elapsed = self._clock.elapsed_seconds(now)
        self.ticker.start(self.publish_tick)

    def _reinitialize(self) -> None:
        self._phase = MatchPhase.SETUP
        self._opponent_name = ""
        self._clock = MatchClock()
        self._ledger = EventLedger()
        self._tally = Tally()
        self._selected_player: Optional[str] = None
        self._next_sequence_id = 1
        self.last_published_elapsed = 0

    def _restore(self, stored: MatchSnapshot) -> None:
        with self._lock:
            self._phase = stored.phase
            self._opponent_name = stored.opponent_name
            self.home_team_name = stored.home_team_name
            self._clock = stored.clock.copy()
            self._ledger = stored.ledger()
            self._tally = stored.tally.copy()
            self._selected_player = stored.selected_player
            self._next_sequence_id = stored.next_sequence_id
            if self._phase is MatchPhase.RUNNING:
                self._start_ticker_locked(now_ts())

        logger.info(
            "Recovered %s session against %s with %s events",
            stored.phase.value, stored.opponent_name or "(unset)", len(stored.events),
        )

    def _snapshot_locked(self, now: float) -> MatchSnapshot:
        return MatchSnapshot(
            phase=self._phase,
            opponent_name=self._opponent_name,
            home_team_name=self.home_team_name,
            elapsed_seconds=self._clock.elapsed_seconds(now),
            clock=self._clock.copy(),
            events=self._ledger.events(),
            tally=self._tally.copy(),
            selected_player=self._selected_player,
            next_sequence_id=self._next_sequence_id,
            taken_at_ts=now,
        )

    def _persist(self, now: float) -> None:
        self.repository.save(self._snapshot_locked(now))
