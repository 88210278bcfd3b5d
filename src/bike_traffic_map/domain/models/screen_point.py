"""Screen point domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScreenPoint:
    """A position on the map canvas in pixels."""

    x: float
    y: float


# Stations without coordinates are drawn here, outside any realistic canvas.
OFF_CANVAS_POINT = ScreenPoint(x=-9999.0, y=-9999.0)
