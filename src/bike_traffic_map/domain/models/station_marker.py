"""Station marker domain model."""

from pydantic import BaseModel, ConfigDict


class StationMarker(BaseModel):
    """Visual encoding of one station on the map layer."""

    model_config = ConfigDict(frozen=True)

    station_id: str
    cx: float
    cy: float
    radius: float
    departure_ratio: float
    title: str
