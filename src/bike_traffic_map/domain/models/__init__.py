"""Domain models for the bike traffic map."""

from bike_traffic_map.domain.models.marker_reconciliation import MarkerReconciliation
from bike_traffic_map.domain.models.screen_point import OFF_CANVAS_POINT, ScreenPoint
from bike_traffic_map.domain.models.station import Station
from bike_traffic_map.domain.models.station_marker import StationMarker
from bike_traffic_map.domain.models.time_filter import (
    LAST_MINUTE_OF_DAY,
    MINUTES_PER_DAY,
    NO_TIME_FILTER,
    is_time_filter_active,
    minutes_since_midnight,
    normalize_time_filter,
)
from bike_traffic_map.domain.models.traffic_dataset import TrafficDataset
from bike_traffic_map.domain.models.traffic_map_settings import TrafficMapSettings
from bike_traffic_map.domain.models.trip import Trip

__all__ = [
    "LAST_MINUTE_OF_DAY",
    "MINUTES_PER_DAY",
    "NO_TIME_FILTER",
    "OFF_CANVAS_POINT",
    "MarkerReconciliation",
    "ScreenPoint",
    "Station",
    "StationMarker",
    "TrafficDataset",
    "TrafficMapSettings",
    "Trip",
    "is_time_filter_active",
    "minutes_since_midnight",
    "normalize_time_filter",
]
