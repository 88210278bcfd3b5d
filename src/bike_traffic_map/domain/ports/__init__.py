"""Ports (interfaces) for the ports-and-adapters architecture."""

from bike_traffic_map.domain.ports.display_adapter import DisplayAdapter
from bike_traffic_map.domain.ports.map_projection import MapProjection, ViewportListener
from bike_traffic_map.domain.ports.station_source import StationSource
from bike_traffic_map.domain.ports.trip_source import TripSource

__all__ = [
    "DisplayAdapter",
    "MapProjection",
    "StationSource",
    "TripSource",
    "ViewportListener",
]
