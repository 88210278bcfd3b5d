"""Projection of station coordinates onto the current map view."""

from bike_traffic_map.domain.models.screen_point import OFF_CANVAS_POINT, ScreenPoint
from bike_traffic_map.domain.models.station import Station
from bike_traffic_map.domain.ports.map_projection import MapProjection


class GeometrySync:
    """Places stations on screen using the map's current view transform.

    Results are never cached: the view may have moved since the last call.
    """

    def __init__(self, projection: MapProjection) -> None:
        self._projection = projection

    @property
    def projection(self) -> MapProjection:
        return self._projection

    def project(self, station: Station) -> ScreenPoint:
        """Screen position of the station, or off-canvas without coordinates."""
        if station.latitude is None or station.longitude is None:
            return OFF_CANVAS_POINT
        return self._projection.project(station.longitude, station.latitude)
