"""Trip windowing around a time of day."""

from collections.abc import Sequence

from bike_traffic_map.domain.models.time_filter import (
    is_time_filter_active,
    minutes_since_midnight,
)
from bike_traffic_map.domain.models.trip import Trip

DEFAULT_WINDOW_MINUTES = 60


def _within_window(trip: Trip, reference_minute: int, window_minutes: int) -> bool:
    for moment in (trip.started_at, trip.ended_at):
        if moment is None:
            continue
        if abs(minutes_since_midnight(moment) - reference_minute) <= window_minutes:
            return True
    return False


def select_trips(
    trips: Sequence[Trip],
    reference_minute: int,
    window_minutes: int = DEFAULT_WINDOW_MINUTES,
) -> Sequence[Trip]:
    """Select the trips that start or end near a minute of the day.

    With the "no filter" sentinel the input is returned as-is. Otherwise a trip
    is kept when its start or end minute lies within ``window_minutes``
    (inclusive) of ``reference_minute``.

    The distance is a plain absolute difference and does not wrap around
    midnight: a 23:30 trip never matches a 00:30 reference. Trips with an
    unknown timestamp only match through their other timestamp.

    The source sequence is never modified; a new list is returned when
    filtering.
    """
    if not is_time_filter_active(reference_minute):
        return trips
    return [trip for trip in trips if _within_window(trip, reference_minute, window_minutes)]
