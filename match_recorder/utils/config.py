"""Runtime configuration for the Live Match Recorder."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    DEFAULT_HOME_TEAM_NAME,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    ENV_PREFIX,
    TICK_INTERVAL_SECONDS,
)


@dataclass(frozen=True)
class AppConfig:
    """Settings shared by the web server and the match session.

    Attributes:
        host: Interface the web server binds to
        port: Port the web server listens on
        home_team_name: Display name used for the Home side in exports
        tick_interval: Seconds between clock ticks while the match runs
        log_level: Name of the root logging level
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    home_team_name: str = DEFAULT_HOME_TEAM_NAME
    tick_interval: float = TICK_INTERVAL_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """
        Build a configuration from ``MATCH_RECORDER_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        env = os.environ if environ is None else environ

        def _get(key: str) -> Optional[str]:
            value = env.get(ENV_PREFIX + key)
            if value is None or not value.strip():
                return None
            return value.strip()

        home = _get("HOME_TEAM") or DEFAULT_HOME_TEAM_NAME
        port = _get("PORT")
        interval = _get("TICK_INTERVAL")

        tick_interval = float(interval) if interval is not None else TICK_INTERVAL_SECONDS
        if tick_interval <= 0:
            raise ValueError("Tick interval must be positive")

        return cls(
            host=_get("HOST") or DEFAULT_HOST,
            port=int(port) if port is not None else DEFAULT_PORT,
            home_team_name=home,
            tick_interval=tick_interval,
            log_level=(_get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )
