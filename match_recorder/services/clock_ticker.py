"""Periodic clock tick for a running match."""
import logging
import threading
from typing import Callable, Optional

from ..utils import TICK_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


class ClockTicker:
    """
    Calls a callback at a fixed interval on a background thread.

    The callback is expected to be a pure read of the clock. ``stop`` must be
    called on every transition out of the running phase and on teardown so no
    stale tick fires after a pause.
    """

    def __init__(self, interval: float = TICK_INTERVAL_SECONDS) -> None:
        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        self.interval = interval
        self._thread: Optional[threading.Thread] = None
        self._stop_event: Optional[threading.Event] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, callback: Callable[[], None]) -> None:
        """Begin ticking; a no-op when already running."""
        if self.is_running:
            return
        stop_event = threading.Event()
        thread = threading.Thread(
            target=self._run,
            args=(callback, stop_event),
            name="match-clock-ticker",
            daemon=True,
        )
        self._stop_event = stop_event
        self._thread = thread
        thread.start()

    def stop(self, wait: bool = True) -> None:
        """
        Stop ticking.

        With ``wait=False`` the worker is only signalled; it exits on its own
        after any callback in flight returns. Callers holding a lock the
        callback needs must not wait.
        """
        if self._stop_event is not None:
            self._stop_event.set()
        thread = self._thread
        self._thread = None
        self._stop_event = None
        if wait and thread is not None and thread is not threading.current_thread():
            thread.join(timeout=max(self.interval * 2, 1.0))

    def _run(self, callback: Callable[[], None], stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval):
            try:
                callback()
            except Exception:
                logger.exception("Clock tick callback failed")
