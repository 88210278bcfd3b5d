"""Web-Mercator viewport mirroring the browser map's view transform."""

import logging
import math

from bike_traffic_map.domain.models import ScreenPoint
from bike_traffic_map.domain.ports import ViewportListener

logger = logging.getLogger(__name__)

TILE_SIZE = 512
MAX_LATITUDE = 85.051129


def _world_x(longitude: float) -> float:
    return (180.0 + longitude) / 360.0


def _world_y(latitude: float) -> float:
    latitude = max(-MAX_LATITUDE, min(MAX_LATITUDE, latitude))
    phi = math.radians(latitude)
    return (180.0 - math.degrees(math.log(math.tan(math.pi / 4 + phi / 2)))) / 360.0


class WebMercatorViewport:
    """Projects coordinates for a map of the given center, zoom and size.

    The browser reports its view after every pan, zoom or resize; each change
    is applied here and subscribers are notified once.
    """

    def __init__(
        self,
        center_longitude: float,
        center_latitude: float,
        zoom: float,
        width: int,
        height: int,
        min_zoom: float = 0,
        max_zoom: float = 22,
    ) -> None:
        self._min_zoom = min_zoom
        self._max_zoom = max_zoom
        self._center_longitude = center_longitude
        self._center_latitude = center_latitude
        self._zoom = self._clamp_zoom(zoom)
        self._width = width
        self._height = height
        self._listeners: list[ViewportListener] = []

    @property
    def center(self) -> tuple[float, float]:
        """Center as (longitude, latitude)."""
        return (self._center_longitude, self._center_latitude)

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    def _clamp_zoom(self, zoom: float) -> float:
        return max(self._min_zoom, min(self._max_zoom, zoom))

    def _world_size(self) -> float:
        return TILE_SIZE * 2**self._zoom

    def project(self, longitude: float, latitude: float) -> ScreenPoint:
        """Pixel position of a coordinate relative to the map's top-left corner."""
        scale = self._world_size()
        x = (_world_x(longitude) - _world_x(self._center_longitude)) * scale
        y = (_world_y(latitude) - _world_y(self._center_latitude)) * scale
        return ScreenPoint(x=x + self._width / 2, y=y + self._height / 2)

    def subscribe(self, listener: ViewportListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ViewportListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def pan_to(self, longitude: float, latitude: float) -> None:
        self.set_view(longitude=longitude, latitude=latitude)

    def zoom_to(self, zoom: float) -> None:
        self.set_view(zoom=zoom)

    def resize(self, width: int, height: int) -> None:
        self.set_view(width=width, height=height)

    def set_view(
        self,
        longitude: float | None = None,
        latitude: float | None = None,
        zoom: float | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> bool:
        """Apply any combination of view changes.

        Returns True and notifies subscribers when something changed.
        """
        view = (
            self._center_longitude if longitude is None else longitude,
            self._center_latitude if latitude is None else latitude,
            self._zoom if zoom is None else self._clamp_zoom(zoom),
            self._width if width is None else width,
            self._height if height is None else height,
        )
        current = (
            self._center_longitude,
            self._center_latitude,
            self._zoom,
            self._width,
            self._height,
        )
        if view == current:
            return False

        (
            self._center_longitude,
            self._center_latitude,
            self._zoom,
            self._width,
            self._height,
        ) = view
        logger.debug(f"Viewport changed: center={self.center} zoom={self._zoom} size={self.size}")
        for listener in list(self._listeners):
            listener()
        return True
