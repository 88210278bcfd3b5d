"""Selection of data sources from configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bike_traffic_map.adapters.data.file_sources import FileStationSource, FileTripSource
from bike_traffic_map.adapters.data.http_sources import HttpStationSource, HttpTripSource

if TYPE_CHECKING:
    import aiohttp

    from bike_traffic_map.adapters.config import AppConfig
    from bike_traffic_map.domain.ports import StationSource, TripSource


def create_sources(
    config: AppConfig, session: aiohttp.ClientSession
) -> tuple[StationSource, TripSource]:
    """Build the station and trip sources; local files win over URLs."""
    station_source: StationSource
    trip_source: TripSource
    if config.stations_file:
        station_source = FileStationSource(config.stations_file)
    else:
        station_source = HttpStationSource(
            config.stations_url, session, config.http_timeout_seconds
        )
    if config.trips_file:
        trip_source = FileTripSource(config.trips_file)
    else:
        trip_source = HttpTripSource(config.trips_url, session, config.http_timeout_seconds)
    return station_source, trip_source
