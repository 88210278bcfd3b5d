"""Adapters layer - external system integrations."""

from bike_traffic_map.adapters.config import AppConfig
from bike_traffic_map.adapters.data import (
    DataSourceError,
    FileStationSource,
    FileTripSource,
    HttpStationSource,
    HttpTripSource,
)
from bike_traffic_map.adapters.map import WebMercatorViewport

__all__ = [
    "AppConfig",
    "DataSourceError",
    "FileStationSource",
    "FileTripSource",
    "HttpStationSource",
    "HttpTripSource",
    "WebMercatorViewport",
]
