"""Trip domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Trip:
    """Represents a single bike rental from one station to another."""

    start_station_id: str
    end_station_id: str
    started_at: datetime | None
    ended_at: datetime | None
