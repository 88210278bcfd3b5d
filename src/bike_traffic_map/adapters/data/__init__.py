"""Data source adapters for stations and trips."""

from bike_traffic_map.adapters.data.errors import DataSourceError
from bike_traffic_map.adapters.data.file_sources import FileStationSource, FileTripSource
from bike_traffic_map.adapters.data.http_sources import HttpStationSource, HttpTripSource
from bike_traffic_map.adapters.data.source_factory import create_sources

__all__ = [
    "DataSourceError",
    "FileStationSource",
    "FileTripSource",
    "HttpStationSource",
    "HttpTripSource",
    "create_sources",
]
