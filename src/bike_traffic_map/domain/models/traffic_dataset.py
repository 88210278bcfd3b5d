"""Traffic dataset domain model."""

from dataclasses import dataclass

from bike_traffic_map.domain.models.station import Station
from bike_traffic_map.domain.models.trip import Trip


@dataclass(frozen=True)
class TrafficDataset:
    """Stations and trips loaded once for the lifetime of the process.

    ``max_total_traffic`` is taken from the unfiltered aggregation and fixes the
    radius domain so marker sizes keep the same meaning under any time filter.
    """

    stations: tuple[Station, ...]
    trips: tuple[Trip, ...]
    max_total_traffic: int

    def clone_stations(self) -> list[Station]:
        """Return per-session copies of the stations."""
        return [station.copy() for station in self.stations]
