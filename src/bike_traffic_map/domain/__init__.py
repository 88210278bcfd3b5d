"""Domain layer - core models and ports."""

from bike_traffic_map.domain.models import Station, StationMarker, Trip
from bike_traffic_map.domain.ports import (
    DisplayAdapter,
    MapProjection,
    StationSource,
    TripSource,
)

__all__ = [
    "DisplayAdapter",
    "MapProjection",
    "Station",
    "StationMarker",
    "StationSource",
    "Trip",
    "TripSource",
]
