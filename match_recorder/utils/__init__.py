"""
Utilities package for the Live Match Recorder.

This package contains utility functions used throughout the application.
"""
from .time_utils import fmt_mmss, now_ts, iso_timestamp, iso_date
from .text_utils import slugify, clean_optional
from .constants import (
    APP_TITLE, DEFAULT_HOME_TEAM_NAME, UNKNOWN_PLAYER_LABEL,
    TICK_INTERVAL_SECONDS, RECENT_EVENTS_LIMIT, EXPORT_CONTENT_TYPES,
    EXPORT_ARTIFACTS
)
from .config import AppConfig
from .logging_utils import configure_logging

__all__ = [
    "fmt_mmss", "now_ts", "iso_timestamp", "iso_date", "slugify",
    "clean_optional", "APP_TITLE", "DEFAULT_HOME_TEAM_NAME",
    "UNKNOWN_PLAYER_LABEL", "TICK_INTERVAL_SECONDS", "RECENT_EVENTS_LIMIT",
    "EXPORT_CONTENT_TYPES", "EXPORT_ARTIFACTS", "AppConfig", "configure_logging"
]
