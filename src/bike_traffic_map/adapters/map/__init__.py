"""Map adapters."""

from bike_traffic_map.adapters.map.web_mercator_viewport import WebMercatorViewport

__all__ = ["WebMercatorViewport"]
