"""Map projection port."""

from collections.abc import Callable
from typing import Protocol

from bike_traffic_map.domain.models.screen_point import ScreenPoint

ViewportListener = Callable[[], None]


class MapProjection(Protocol):
    """Port for the map renderer's coordinate projection and viewport events."""

    def project(self, longitude: float, latitude: float) -> ScreenPoint:
        """Project a geographic coordinate to the current screen position."""
        ...

    def subscribe(self, listener: ViewportListener) -> None:
        """Call ``listener`` after every pan, zoom or resize of the viewport."""
        ...
