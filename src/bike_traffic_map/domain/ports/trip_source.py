"""Trip source port."""

from typing import Protocol

from bike_traffic_map.domain.models.trip import Trip


class TripSource(Protocol):
    """Port for loading the trip history."""

    async def load_trips(self) -> list[Trip]:
        """Load all trips in canonical form."""
        ...
