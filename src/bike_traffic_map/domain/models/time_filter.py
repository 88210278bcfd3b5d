"""Time-of-day filter constants and helpers."""

from datetime import datetime

NO_TIME_FILTER = -1
MINUTES_PER_DAY = 24 * 60
LAST_MINUTE_OF_DAY = MINUTES_PER_DAY - 1


def is_time_filter_active(minute: int) -> bool:
    """Return True when the value selects a minute of the day."""
    return minute != NO_TIME_FILTER


def normalize_time_filter(minute: int) -> int:
    """Map any slider value onto the sentinel or a valid minute of the day."""
    if minute <= NO_TIME_FILTER:
        return NO_TIME_FILTER
    return min(minute, LAST_MINUTE_OF_DAY)


def minutes_since_midnight(moment: datetime) -> int:
    """Wall-clock minutes since midnight; the date part is ignored."""
    return moment.hour * 60 + moment.minute
