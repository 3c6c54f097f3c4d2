"""
Utility functions for the Game Planner application.

This module contains time formatting helpers used by the plan renderer
and the persistence layer.
"""
import time


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


def fmt_match_minute(minute: int) -> str:
    """
    Format a match minute (minutes from kickoff) as a clock label.

    Example:
        >>> fmt_match_minute(0)
        '00:00'
        >>> fmt_match_minute(45)
        '45:00'
    """
    return fmt_mmss(int(minute) * 60)


def now_ts() -> float:
    """
    Get current timestamp in epoch seconds.

    Returns:
        Current time as floating point epoch seconds
    """
    return time.time()
