"""Traffic map view."""

from .traffic_map import TrafficMapLiveView, create_traffic_map_live_view

__all__ = ["TrafficMapLiveView", "create_traffic_map_live_view"]
