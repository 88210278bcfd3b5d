"""Per-station traffic aggregation."""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence

from bike_traffic_map.domain.models.station import Station
from bike_traffic_map.domain.models.trip import Trip

logger = logging.getLogger(__name__)


def aggregate_station_traffic(stations: Sequence[Station], trips: Iterable[Trip]) -> Sequence[Station]:
    """Recompute arrivals, departures and total traffic for every station.

    Counters are overwritten in place and the same sequence is returned. Trips
    that reference an unknown station identity are counted but never read
    back. Stations are neither added nor removed.
    """
    departures: Counter[str] = Counter()
    arrivals: Counter[str] = Counter()
    for trip in trips:
        departures[trip.start_station_id] += 1
        arrivals[trip.end_station_id] += 1

    for station in stations:
        station.departures = departures.get(station.id, 0)
        station.arrivals = arrivals.get(station.id, 0)
        station.total_traffic = station.arrivals + station.departures

    logger.debug(
        f"Aggregated {sum(departures.values())} trips over {len(stations)} stations"
    )
    return stations


def max_total_traffic(stations: Iterable[Station]) -> int:
    """Largest total traffic of any station, or 1 when there is none."""
    return max((station.total_traffic for station in stations), default=0) or 1
