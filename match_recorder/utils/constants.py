"""
Constants for the Live Match Recorder application.

This module contains configuration constants used throughout the application.
"""

# Application metadata
APP_TITLE = "Live Match Recorder"

# Team naming
DEFAULT_HOME_TEAM_NAME = "Home"
UNKNOWN_PLAYER_LABEL = "Unknown"

# Clock
TICK_INTERVAL_SECONDS = 1.0

# Live feed
RECENT_EVENTS_LIMIT = 10

# Web server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7122
DEFAULT_LOG_LEVEL = "INFO"

# Environment variable prefix for AppConfig overrides
ENV_PREFIX = "MATCH_RECORDER_"

# Export formats and their content types
EXPORT_CONTENT_TYPES = {
    "json": "application/json",
    "csv": "text/csv",
}
EXPORT_ARTIFACTS = ("events", "totals")
