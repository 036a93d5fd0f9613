"""
Utility functions for the Live Match Recorder application.

This module contains time helpers used throughout the application.
"""
import time
from datetime import datetime, timezone


def fmt_mmss(seconds: int) -> str:
    """
    Format seconds as MM:SS string.

    Args:
        seconds: Number of seconds to format

    Returns:
        Formatted time string in MM:SS format

    Example:
        >>> fmt_mmss(90)
        '01:30'
        >>> fmt_mmss(3661)
        '61:01'
    """
    m = seconds // 60
    s = seconds % 60
    return f"{m:02d}:{s:02d}"


def now_ts() -> float:
    """
    Get current timestamp in epoch seconds.

    Returns:
        Current time as floating point epoch seconds
    """
    return time.time()


def iso_timestamp(ts: float) -> str:
    """
    Render an epoch timestamp as a UTC ISO-8601 instant.

    Example:
        >>> iso_timestamp(0)
        '1970-01-01T00:00:00.000Z'
    """
    moment = datetime.fromtimestamp(ts, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def iso_date(ts: float) -> str:
    """Return the UTC calendar date of ``ts`` as ``YYYY-MM-DD``."""
    return datetime.fromtimestamp(ts, tz=timezone.utc).date().isoformat()
