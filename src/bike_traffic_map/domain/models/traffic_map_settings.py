"""Traffic map settings domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TrafficMapSettings:
    """Tunables for windowing and radius encoding."""

    window_minutes: int = 60
    unfiltered_radius_range: tuple[float, float] = (0.0, 25.0)
    # Raised floor keeps stations with little filtered traffic visible.
    filtered_radius_range: tuple[float, float] = (3.0, 50.0)
