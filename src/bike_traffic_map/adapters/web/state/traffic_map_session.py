"""Per-connection traffic map session."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bike_traffic_map.adapters.map import WebMercatorViewport
from bike_traffic_map.adapters.formatters import ClockFormatter
from bike_traffic_map.application.services import GeometrySync, TrafficMapController

from .traffic_map_state import TrafficMapState

if TYPE_CHECKING:
    from bike_traffic_map.adapters.config import AppConfig
    from bike_traffic_map.domain.models import TrafficDataset

logger = logging.getLogger(__name__)


class TrafficMapSession:
    """Viewport and controller owned by one browser connection.

    Each session works on its own copy of the stations, so one visitor's time
    filter never changes another visitor's markers.
    """

    def __init__(self, dataset: TrafficDataset, config: AppConfig) -> None:
        self.viewport = WebMercatorViewport(
            center_longitude=config.map_center_longitude,
            center_latitude=config.map_center_latitude,
            zoom=config.map_zoom,
            width=config.viewport_width,
            height=config.viewport_height,
            min_zoom=config.map_min_zoom,
            max_zoom=config.map_max_zoom,
        )
        self.controller = TrafficMapController(
            stations=dataset.clone_stations(),
            trips=dataset.trips,
            max_total_traffic=dataset.max_total_traffic,
            geometry_sync=GeometrySync(self.viewport),
            clock_formatter=ClockFormatter(config),
            settings=config.to_traffic_map_settings(),
        )
        self.viewport.subscribe(self.controller.on_viewport_changed)
        self.controller.on_filter_changed(self.controller.time_filter)

    def set_time_filter(self, minute: int) -> None:
        self.controller.on_filter_changed(minute)

    def set_view(
        self,
        longitude: float | None = None,
        latitude: float | None = None,
        zoom: float | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> bool:
        """Mirror the browser's view; markers move through the viewport subscription."""
        return self.viewport.set_view(
            longitude=longitude, latitude=latitude, zoom=zoom, width=width, height=height
        )

    def snapshot(self) -> TrafficMapState:
        """Build the LiveView context from the controller's current output."""
        clock_label = self.controller.clock_label
        return TrafficMapState(
            markers=self.controller.markers,
            time_filter=self.controller.time_filter,
            clock_label=clock_label or "",
            any_time_visible=clock_label is None,
            trip_count=self.controller.filtered_trip_count,
            station_count=len(self.controller.stations),
        )
