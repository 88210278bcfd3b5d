"""Station source port."""

from typing import Protocol

from bike_traffic_map.domain.models.station import Station


class StationSource(Protocol):
    """Port for loading the station list."""

    async def load_stations(self) -> list[Station]:
        """Load all stations in canonical form."""
        ...
