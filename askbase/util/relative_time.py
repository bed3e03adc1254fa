"""Human-readable post ages.

    45 seconds ago
    12 minutes ago
    5 hours ago
    Mar 04 at 09:15          (older than a day, same calendar year)
    Mar 04, 2023 at 09:15    (older than a day, different year)
"""

from datetime import datetime, timedelta

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def relative_time(timestamp: datetime, now: datetime) -> str:
    """Describe how long ago ``timestamp`` was, as seen from ``now``.

    Thresholds use whole elapsed seconds, floored, and are half-open:
    59 seconds is still "59 seconds ago", 60 seconds is "1 minutes ago".

    Args:
        timestamp: Moment being described
        now: Reference moment

    Returns:
        Display string for the elapsed time
    """
    seconds = max((now - timestamp) // timedelta(seconds=1), 0)
    if seconds < 60:
        return f"{seconds} seconds ago"

    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes} minutes ago"

    hours = minutes // 60
    if hours < 24:
        return f"{hours} hours ago"

    return format_date(timestamp, now)


def format_date(timestamp: datetime, now: datetime) -> str:
    """Format as "<Mon> <DD> at <HH:MM>", adding the year if it differs."""
    month = MONTH_ABBREVIATIONS[timestamp.month - 1]
    clock = f"{timestamp.hour:02d}:{timestamp.minute:02d}"
    if timestamp.year == now.year:
        return f"{month} {timestamp.day:02d} at {clock}"
    return f"{month} {timestamp.day:02d}, {timestamp.year} at {clock}"
