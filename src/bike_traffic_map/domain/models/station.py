"""Station domain model."""

from dataclasses import dataclass


@dataclass
class Station:
    """Represents a bike-docking station and its aggregated traffic.

    The identity and position are fixed at load time. The three counters are
    derived values that every aggregation pass overwrites in place.
    """

    id: str
    name: str
    latitude: float | None
    longitude: float | None
    arrivals: int = 0
    departures: int = 0
    total_traffic: int = 0

    @property
    def has_coordinates(self) -> bool:
        """Whether both latitude and longitude are known."""
        return self.latitude is not None and self.longitude is not None

    def copy(self) -> "Station":
        """Return an independent copy with the same identity and counters."""
        return Station(
            id=self.id,
            name=self.name,
            latitude=self.latitude,
            longitude=self.longitude,
            arrivals=self.arrivals,
            departures=self.departures,
            total_traffic=self.total_traffic,
        )
