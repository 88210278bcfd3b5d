"""Application services."""

from bike_traffic_map.application.services.geometry_sync import GeometrySync
from bike_traffic_map.application.services.traffic_aggregator import (
    aggregate_station_traffic,
    max_total_traffic,
)
from bike_traffic_map.application.services.traffic_dataset_service import TrafficDatasetService
from bike_traffic_map.application.services.traffic_map_controller import (
    TrafficMapController,
    station_title,
)
from bike_traffic_map.application.services.trip_windowing import (
    DEFAULT_WINDOW_MINUTES,
    select_trips,
)
from bike_traffic_map.application.services.visual_encoding import (
    BALANCED_RATIO,
    FlowRatioScale,
    RadiusScale,
    departure_ratio,
)

__all__ = [
    "BALANCED_RATIO",
    "DEFAULT_WINDOW_MINUTES",
    "FlowRatioScale",
    "GeometrySync",
    "RadiusScale",
    "TrafficDatasetService",
    "TrafficMapController",
    "aggregate_station_traffic",
    "departure_ratio",
    "max_total_traffic",
    "select_trips",
    "station_title",
]
