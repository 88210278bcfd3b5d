"""Tests for TrafficDatasetService."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from bike_traffic_map.adapters.data import DataSourceError
from bike_traffic_map.application.services import TrafficDatasetService
from bike_traffic_map.domain.models import Station, Trip


def _sources(stations: list[Station], trips: list[Trip]) -> tuple[MagicMock, MagicMock]:
    station_source = MagicMock()
    station_source.load_stations = AsyncMock(return_value=stations)
    trip_source = MagicMock()
    trip_source.load_trips = AsyncMock(return_value=trips)
    return station_source, trip_source


@pytest.mark.asyncio
async def test_load_aggregates_unfiltered_traffic() -> None:
    """Given stations and trips, when loading, then unfiltered counters and max are computed."""
    stations = [
        Station(id="A", name="Alpha", latitude=1.0, longitude=1.0),
        Station(id="B", name="Bravo", latitude=2.0, longitude=2.0),
    ]
    trip = Trip("A", "B", datetime(2024, 3, 1, 8, 10), datetime(2024, 3, 1, 8, 25))
    station_source, trip_source = _sources(stations, [trip, trip, trip])

    dataset = await TrafficDatasetService(station_source, trip_source).load()

    assert [(s.id, s.total_traffic) for s in dataset.stations] == [("A", 3), ("B", 3)]
    assert dataset.trips == (trip, trip, trip)
    assert dataset.max_total_traffic == 3
    station_source.load_stations.assert_awaited_once()
    trip_source.load_trips.assert_awaited_once()


@pytest.mark.asyncio
async def test_load_empty_sources() -> None:
    """Given empty sources, when loading, then an empty dataset with max 1 is returned."""
    station_source, trip_source = _sources([], [])

    dataset = await TrafficDatasetService(station_source, trip_source).load()

    assert dataset.stations == ()
    assert dataset.trips == ()
    assert dataset.max_total_traffic == 1


@pytest.mark.asyncio
async def test_load_propagates_source_errors() -> None:
    """Given a failing source, when loading, then the error reaches the caller."""
    station_source, trip_source = _sources([], [])
    trip_source.load_trips = AsyncMock(side_effect=DataSourceError("trips.csv", "boom"))

    with pytest.raises(DataSourceError, match="trips.csv"):
        await TrafficDatasetService(station_source, trip_source).load()
