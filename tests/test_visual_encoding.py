"""Tests for the radius and flow-ratio scales."""

import pytest

from bike_traffic_map.application.services import (
    BALANCED_RATIO,
    FlowRatioScale,
    RadiusScale,
    departure_ratio,
)
from bike_traffic_map.domain.models import Station


def test_radius_scale_maps_domain_ends_to_range_ends() -> None:
    """Given a domain and range, when scaling the ends, then range min and max are returned."""
    scale = RadiusScale(domain=(0, 100), output_range=(0, 25))

    assert scale(0) == 0
    assert scale(100) == 25


def test_radius_scale_is_square_root() -> None:
    """Given a quarter of the max traffic, when scaling, then the radius is half the max."""
    scale = RadiusScale(domain=(0, 100), output_range=(0, 25))

    assert scale(25) == pytest.approx(12.5)


def test_radius_scale_is_monotonic() -> None:
    """Given increasing traffic, when scaling, then radii never decrease."""
    scale = RadiusScale(domain=(0, 500), output_range=(3, 50))

    radii = [scale(value) for value in range(0, 501, 7)]

    assert radii == sorted(radii)


def test_radius_scale_range_switch_raises_floor() -> None:
    """Given a switched range, when scaling zero traffic, then the floor radius is returned."""
    scale = RadiusScale(domain=(0, 10), output_range=(0, 25))

    scale.set_range(3, 50)

    assert scale.output_range == (3, 50)
    assert scale(0) == 3
    assert scale(10) == 50


def test_radius_scale_degenerate_domain_returns_midpoint() -> None:
    """Given an empty domain, when scaling, then the middle of the range is returned."""
    scale = RadiusScale(domain=(0, 0), output_range=(0, 20))

    assert scale(0) == 10


@pytest.mark.parametrize(
    ("ratio", "bucket"),
    [
        (0.0, 0.0),
        (0.2, 0.0),
        (1 / 3, 0.5),
        (0.5, 0.5),
        (0.6, 0.5),
        (2 / 3, 1.0),
        (0.9, 1.0),
        (1.0, 1.0),
    ],
)
def test_flow_ratio_scale_buckets(ratio: float, bucket: float) -> None:
    """Given a departure ratio, when quantizing, then it lands in the expected bucket."""
    assert FlowRatioScale()(ratio) == bucket


def test_flow_ratio_scale_clamps_out_of_domain_values() -> None:
    """Given values outside [0, 1], when quantizing, then the end buckets are used."""
    scale = FlowRatioScale()

    assert scale(-0.5) == 0.0
    assert scale(1.5) == 1.0


def test_departure_ratio_for_idle_station_is_balanced() -> None:
    """Given a station without traffic, when computing its ratio, then the midpoint is used."""
    station = Station(id="A", name="A", latitude=None, longitude=None)

    assert departure_ratio(station) == BALANCED_RATIO
    assert FlowRatioScale()(departure_ratio(station)) == 0.5


def test_departure_ratio_is_share_of_departures() -> None:
    """Given a station with traffic, when computing its ratio, then departures over total is returned."""
    station = Station(
        id="A", name="A", latitude=None, longitude=None, arrivals=1, departures=3, total_traffic=4
    )

    assert departure_ratio(station) == 0.75
