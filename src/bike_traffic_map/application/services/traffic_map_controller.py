"""Reactive controller for the station traffic map."""

import logging
from collections.abc import Sequence

from bike_traffic_map.application.services.geometry_sync import GeometrySync
from bike_traffic_map.application.services.traffic_aggregator import aggregate_station_traffic
from bike_traffic_map.application.services.trip_windowing import select_trips
from bike_traffic_map.application.services.visual_encoding import (
    FlowRatioScale,
    RadiusScale,
    departure_ratio,
)
from bike_traffic_map.domain.contracts.clock_formatter import ClockFormatterProtocol
from bike_traffic_map.domain.models.marker_reconciliation import MarkerReconciliation
from bike_traffic_map.domain.models.station import Station
from bike_traffic_map.domain.models.station_marker import StationMarker
from bike_traffic_map.domain.models.time_filter import (
    NO_TIME_FILTER,
    is_time_filter_active,
    normalize_time_filter,
)
from bike_traffic_map.domain.models.traffic_map_settings import TrafficMapSettings
from bike_traffic_map.domain.models.trip import Trip

logger = logging.getLogger(__name__)


def station_title(station: Station) -> str:
    """Descriptive marker text for a station."""
    return (
        f"{station.name}\n{station.total_traffic} trips "
        f"({station.departures} departures, {station.arrivals} arrivals)"
    )


class TrafficMapController:
    """Owns the time filter and keeps the marker layer in sync with it.

    The controller is the only writer of the station counters and of the
    current filter. Every filter change recomputes traffic from scratch, so
    rapid successive changes are independent and the layer always reflects
    the latest one. Viewport changes only move markers.
    """

    def __init__(
        self,
        stations: list[Station],
        trips: Sequence[Trip],
        max_total_traffic: int,
        geometry_sync: GeometrySync,
        clock_formatter: ClockFormatterProtocol,
        settings: TrafficMapSettings | None = None,
    ) -> None:
        """Initialize the controller in the unfiltered state.

        Args:
            stations: Stations owned by this controller; counters are mutated.
            trips: Full trip history, never modified.
            max_total_traffic: Largest unfiltered station total, fixes the radius domain.
            geometry_sync: Projects stations onto the current map view.
            clock_formatter: Formats the selected minute for the clock label.
            settings: Window width and radius ranges.
        """
        self._settings = settings or TrafficMapSettings()
        self._stations = stations
        self._trips = trips
        self._geometry_sync = geometry_sync
        self._clock_formatter = clock_formatter
        self._radius_scale = RadiusScale(
            domain=(0, max_total_traffic or 1),
            output_range=self._settings.unfiltered_radius_range,
        )
        self._flow_scale = FlowRatioScale()
        self._time_filter = NO_TIME_FILTER
        self._filtered_trip_count = len(trips)
        self._markers: dict[str, StationMarker] = {}

    @property
    def time_filter(self) -> int:
        return self._time_filter

    @property
    def is_filtered(self) -> bool:
        return is_time_filter_active(self._time_filter)

    @property
    def clock_label(self) -> str | None:
        """Selected time as a clock string, or None when showing the whole day."""
        if not self.is_filtered:
            return None
        return self._clock_formatter.format_minute(self._time_filter)

    @property
    def filtered_trip_count(self) -> int:
        return self._filtered_trip_count

    @property
    def radius_scale(self) -> RadiusScale:
        return self._radius_scale

    @property
    def stations(self) -> Sequence[Station]:
        return tuple(self._stations)

    @property
    def markers(self) -> list[StationMarker]:
        """Current markers in station order."""
        return list(self._markers.values())

    def marker_for(self, station_id: str) -> StationMarker | None:
        return self._markers.get(station_id)

    def on_filter_changed(self, minute: int) -> MarkerReconciliation:
        """Apply a new slider value and rebuild every marker."""
        self._time_filter = normalize_time_filter(minute)

        filtered_trips = select_trips(
            self._trips, self._time_filter, self._settings.window_minutes
        )
        self._filtered_trip_count = len(filtered_trips)
        aggregate_station_traffic(self._stations, filtered_trips)

        if self.is_filtered:
            self._radius_scale.set_range(*self._settings.filtered_radius_range)
        else:
            self._radius_scale.set_range(*self._settings.unfiltered_radius_range)

        reconciliation = self._reconcile()
        logger.debug(
            f"Filter {self._time_filter}: {self._filtered_trip_count} trips, "
            f"markers entered={reconciliation.entered} updated={reconciliation.updated} "
            f"exited={reconciliation.exited}"
        )
        return reconciliation

    def on_viewport_changed(self) -> None:
        """Re-project every marker after a pan, zoom or resize."""
        repositioned: dict[str, StationMarker] = {}
        for station in self._stations:
            marker = self._markers.get(station.id)
            if marker is None or station.id in repositioned:
                continue
            point = self._geometry_sync.project(station)
            repositioned[station.id] = marker.model_copy(update={"cx": point.x, "cy": point.y})
        self._markers = repositioned

    def _build_marker(self, station: Station) -> StationMarker:
        point = self._geometry_sync.project(station)
        return StationMarker(
            station_id=station.id,
            cx=point.x,
            cy=point.y,
            radius=self._radius_scale(station.total_traffic),
            departure_ratio=self._flow_scale(departure_ratio(station)),
            title=station_title(station),
        )

    def _reconcile(self) -> MarkerReconciliation:
        """Rebuild markers keyed by station identity."""
        previous = self._markers
        current: dict[str, StationMarker] = {}
        for station in self._stations:
            if station.id in current:
                continue
            current[station.id] = self._build_marker(station)

        self._markers = current
        return MarkerReconciliation(
            entered=len(current.keys() - previous.keys()),
            updated=len(current.keys() & previous.keys()),
            exited=len(previous.keys() - current.keys()),
        )
