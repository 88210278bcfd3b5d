"""One-time loading of the station and trip datasets."""

import asyncio
import logging

from bike_traffic_map.application.services.traffic_aggregator import (
    aggregate_station_traffic,
    max_total_traffic,
)
from bike_traffic_map.domain.models.traffic_dataset import TrafficDataset
from bike_traffic_map.domain.ports.station_source import StationSource
from bike_traffic_map.domain.ports.trip_source import TripSource

logger = logging.getLogger(__name__)


class TrafficDatasetService:
    """Loads stations and trips and computes the unfiltered traffic."""

    def __init__(self, station_source: StationSource, trip_source: TripSource) -> None:
        """Initialize with the two data sources."""
        self._station_source = station_source
        self._trip_source = trip_source

    async def load(self) -> TrafficDataset:
        """Load both datasets concurrently and aggregate all-day traffic.

        Load errors from the sources propagate unchanged.
        """
        stations, trips = await asyncio.gather(
            self._station_source.load_stations(),
            self._trip_source.load_trips(),
        )
        aggregate_station_traffic(stations, trips)
        maximum = max_total_traffic(stations)

        logger.info(f"Stations loaded: {len(stations)}")
        logger.info(f"Trips loaded: {len(trips)}")
        logger.info(f"Busiest station total: {maximum}")

        return TrafficDataset(
            stations=tuple(stations),
            trips=tuple(trips),
            max_total_traffic=maximum,
        )
