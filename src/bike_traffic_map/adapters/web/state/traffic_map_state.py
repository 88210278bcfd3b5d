"""Traffic map state dataclass."""

from dataclasses import dataclass, field

from bike_traffic_map.domain.models import NO_TIME_FILTER, StationMarker


@dataclass
class TrafficMapState:
    """State for the traffic map LiveView."""

    markers: list[StationMarker] = field(default_factory=list)
    time_filter: int = NO_TIME_FILTER
    clock_label: str = ""  # Empty while showing the whole day
    any_time_visible: bool = True
    trip_count: int = 0  # Trips inside the active window
    station_count: int = 0
