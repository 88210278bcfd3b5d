"""Tests for domain models."""

from datetime import datetime

from bike_traffic_map.domain.models import (
    LAST_MINUTE_OF_DAY,
    NO_TIME_FILTER,
    MarkerReconciliation,
    Station,
    StationMarker,
    TrafficDataset,
    Trip,
    is_time_filter_active,
    minutes_since_midnight,
    normalize_time_filter,
)


def test_station_creation_defaults_counters_to_zero() -> None:
    """Given station data, when creating a Station, then counters start at zero."""
    station = Station(id="A32000", name="Kendall T", latitude=42.3625, longitude=-71.0842)

    assert station.id == "A32000"
    assert station.arrivals == 0
    assert station.departures == 0
    assert station.total_traffic == 0
    assert station.has_coordinates is True


def test_station_without_longitude_has_no_coordinates() -> None:
    """Given a station missing its longitude, when checked, then it has no coordinates."""
    station = Station(id="X", name="Nowhere", latitude=42.0, longitude=None)

    assert station.has_coordinates is False


def test_station_copy_is_independent() -> None:
    """Given a station with counters, when copied and mutated, then the original is unchanged."""
    station = Station(
        id="A", name="A", latitude=1.0, longitude=2.0, arrivals=3, departures=4, total_traffic=7
    )

    clone = station.copy()
    clone.arrivals = 0

    assert clone.departures == 4
    assert clone.arrivals == 0
    assert station.arrivals == 3


def test_dataset_clone_stations_returns_fresh_objects() -> None:
    """Given a dataset, when cloning stations, then each clone is a distinct object."""
    station = Station(id="A", name="A", latitude=1.0, longitude=2.0)
    dataset = TrafficDataset(stations=(station,), trips=(), max_total_traffic=1)

    clones = dataset.clone_stations()

    assert clones == [station]
    assert clones[0] is not station


def test_trip_is_frozen() -> None:
    """Given a trip, when inspecting, then its fields are set."""
    trip = Trip("A", "B", datetime(2024, 3, 1, 8, 10), datetime(2024, 3, 1, 8, 25))

    assert trip.start_station_id == "A"
    assert trip.end_station_id == "B"


def test_minutes_since_midnight_ignores_date() -> None:
    """Given timestamps on different days, when converted, then only the clock time counts."""
    assert minutes_since_midnight(datetime(2024, 3, 1, 8, 10, 59)) == 490
    assert minutes_since_midnight(datetime(1999, 12, 31, 8, 10)) == 490
    assert minutes_since_midnight(datetime(2024, 3, 1, 0, 0)) == 0


def test_normalize_time_filter_maps_slider_values() -> None:
    """Given slider values, when normalizing, then they map to sentinel or a valid minute."""
    assert normalize_time_filter(-1) == NO_TIME_FILTER
    assert normalize_time_filter(-50) == NO_TIME_FILTER
    assert normalize_time_filter(0) == 0
    assert normalize_time_filter(720) == 720
    assert normalize_time_filter(5000) == LAST_MINUTE_OF_DAY


def test_is_time_filter_active() -> None:
    """Given the sentinel and a minute, when checked, then only the minute is active."""
    assert is_time_filter_active(NO_TIME_FILTER) is False
    assert is_time_filter_active(0) is True


def test_station_marker_and_reconciliation() -> None:
    """Given marker and reconciliation data, when creating models, then fields are set."""
    marker = StationMarker(
        station_id="A", cx=1.0, cy=2.0, radius=3.0, departure_ratio=0.5, title="A"
    )
    reconciliation = MarkerReconciliation(entered=2, updated=3, exited=1)

    assert marker.radius == 3.0
    assert reconciliation.total == 5
