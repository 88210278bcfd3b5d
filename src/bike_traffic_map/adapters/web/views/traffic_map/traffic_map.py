"""Traffic map LiveView for exploring station activity by time of day."""

from __future__ import annotations

import logging
import math
import os
from typing import Any

from pyview import LiveView, LiveViewSocket
from pyview.template.live_template import LiveRender, LiveTemplate
from pyview.vendor import ibis
from pyview.vendor.ibis.loaders import FileReloader

from bike_traffic_map.adapters.config import AppConfig
from bike_traffic_map.adapters.web.state import TrafficMapSession, TrafficMapState
from bike_traffic_map.domain.models import LAST_MINUTE_OF_DAY, NO_TIME_FILTER, TrafficDataset

logger = logging.getLogger(__name__)


def _payload_value(payload: Any, key: str) -> Any:
    """Read a field from an event payload.

    Form events deliver lists of strings, hook events deliver plain values.
    """
    if not isinstance(payload, dict):
        return None
    value = payload.get(key)
    if isinstance(value, list):
        return value[0] if value else None
    return value


def _parse_int(value: Any) -> int | None:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def _parse_float(value: Any) -> float | None:
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


_VIEWPORT_FIELDS = {
    "longitude": _parse_float,
    "latitude": _parse_float,
    "zoom": _parse_float,
    "width": _parse_int,
    "height": _parse_int,
}


def _parse_viewport(payload: Any) -> dict[str, Any] | None:
    """Parse a viewport event; None when any supplied field is invalid or none is given."""
    view: dict[str, Any] = {}
    for name, parse in _VIEWPORT_FIELDS.items():
        raw = _payload_value(payload, name)
        if raw is None or raw == "":
            view[name] = None
            continue
        value = parse(raw)
        if value is None:
            return None
        view[name] = value
    if all(value is None for value in view.values()):
        return None
    return view


class TrafficMapLiveView(LiveView[TrafficMapState]):
    """LiveView adapter translating slider and viewport events into controller calls."""

    def __init__(self, dataset: TrafficDataset, config: AppConfig) -> None:
        """Initialize the LiveView.

        Args:
            dataset: Stations and trips loaded at startup.
            config: Application configuration.
        """
        super().__init__()
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not isinstance(dataset, TrafficDataset):
            raise TypeError("dataset must be a TrafficDataset instance")

        self.dataset = dataset
        self.config = config
        self._sessions: dict[LiveViewSocket[TrafficMapState], TrafficMapSession] = {}

    @property
    def session_count(self) -> int:
        return len(self._sessions)

    def _session_for(self, socket: LiveViewSocket[TrafficMapState]) -> TrafficMapSession:
        session = self._sessions.get(socket)
        if session is None:
            session = TrafficMapSession(self.dataset, self.config)
            self._sessions[socket] = session
        return session

    async def mount(self, socket: LiveViewSocket[TrafficMapState], _session: dict) -> None:
        """Create this connection's session and render the all-day view."""
        session = self._session_for(socket)
        socket.context = session.snapshot()
        logger.info(f"Mounted traffic map session, active sessions: {len(self._sessions)}")

    async def unmount(self, socket: LiveViewSocket[TrafficMapState]) -> None:
        """Drop the session owned by this socket."""
        self._release(socket)

    async def disconnect(self, socket: LiveViewSocket[TrafficMapState]) -> None:
        """Drop the session owned by this socket."""
        self._release(socket)

    def _release(self, socket: LiveViewSocket[TrafficMapState]) -> None:
        if self._sessions.pop(socket, None) is not None:
            logger.info(f"Released traffic map session, active sessions: {len(self._sessions)}")

    async def handle_event(
        self, event: str, payload: Any, socket: LiveViewSocket[TrafficMapState]
    ) -> None:
        """Handle slider ("filter") and map view ("viewport") events."""
        session = self._session_for(socket)

        if event == "filter":
            minute = _parse_int(_payload_value(payload, "time"))
            if minute is None:
                logger.warning(f"Ignoring filter event with invalid payload: {payload}")
                return
            session.set_time_filter(minute)
        elif event == "viewport":
            view = _parse_viewport(payload)
            if view is None:
                logger.warning(f"Ignoring viewport event with invalid payload: {payload}")
                return
            session.set_view(**view)
        else:
            logger.debug(f"Ignoring unknown event '{event}'")
            return

        socket.context = session.snapshot()

    def _build_template_assigns(self, state: TrafficMapState) -> dict[str, Any]:
        """Template variables for the map page."""
        return {
            "markers": [
                {
                    "station_id": marker.station_id,
                    "cx": f"{marker.cx:.2f}",
                    "cy": f"{marker.cy:.2f}",
                    "r": f"{marker.radius:.2f}",
                    "departure_ratio": str(marker.departure_ratio),
                    "title": marker.title,
                }
                for marker in state.markers
            ],
            "time_filter": str(state.time_filter),
            "clock_label": state.clock_label,
            "any_time_visible": state.any_time_visible,
            "trip_count": str(state.trip_count),
            "station_count": str(state.station_count),
            "slider_min": str(NO_TIME_FILTER),
            "slider_max": str(LAST_MINUTE_OF_DAY),
            "title": self.config.title,
            "mapbox_access_token": self.config.mapbox_access_token,
            "map_style": self.config.map_style,
            "map_center_longitude": str(self.config.map_center_longitude),
            "map_center_latitude": str(self.config.map_center_latitude),
            "map_zoom": str(self.config.map_zoom),
            "map_min_zoom": str(self.config.map_min_zoom),
            "map_max_zoom": str(self.config.map_max_zoom),
            "bike_lane_sources": "|".join(self.config.bike_lane_sources),
        }

    async def render(self, assigns: TrafficMapState | dict, meta: Any) -> Any:
        """Render the HTML template."""
        state = assigns if isinstance(assigns, TrafficMapState) else TrafficMapState()
        try:
            views_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
            if not hasattr(ibis, "loader") or not isinstance(ibis.loader, FileReloader):
                ibis.loader = FileReloader(views_dir)

            template_file = os.path.join(views_dir, "traffic_map", "traffic_map.html")
            with open(template_file, encoding="utf-8") as f:
                template = ibis.Template(f.read())

            return LiveRender(LiveTemplate(template), self._build_template_assigns(state), meta)
        except Exception as e:
            logger.error(f"Error rendering template: {e}", exc_info=True)
            error_template = ibis.Template("<div>Error rendering template: {{ error }}</div>")
            return LiveRender(LiveTemplate(error_template), {"error": str(e)}, meta)


def create_traffic_map_live_view(
    dataset: TrafficDataset, config: AppConfig
) -> type[TrafficMapLiveView]:
    """Create a configured TrafficMapLiveView class.

    PyView's add_live_view expects a class, not an instance, so the dataset
    and configuration are captured in a subclass.
    """
    captured_dataset = dataset
    captured_config = config

    class ConfiguredTrafficMapLiveView(TrafficMapLiveView):
        """Configured LiveView bound to the loaded dataset."""

        def __init__(self) -> None:
            super().__init__(captured_dataset, captured_config)

    return ConfiguredTrafficMapLiveView
