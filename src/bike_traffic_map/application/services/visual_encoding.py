"""Scales that turn station traffic into marker radius and color bucket."""

import math
from bisect import bisect_right

from bike_traffic_map.domain.models.station import Station

BALANCED_RATIO = 0.5


class RadiusScale:
    """Square-root scale from traffic magnitude to pixel radius.

    The visual area of a marker is proportional to its traffic. Values outside
    the domain are extrapolated, not clamped.
    """

    def __init__(
        self,
        domain: tuple[float, float] = (0.0, 1.0),
        output_range: tuple[float, float] = (0.0, 25.0),
    ) -> None:
        self._domain = domain
        self._range = output_range

    @property
    def domain(self) -> tuple[float, float]:
        return self._domain

    @property
    def output_range(self) -> tuple[float, float]:
        return self._range

    def set_domain(self, low: float, high: float) -> None:
        self._domain = (low, high)

    def set_range(self, low: float, high: float) -> None:
        self._range = (low, high)

    @staticmethod
    def _sqrt(value: float) -> float:
        return math.copysign(math.sqrt(abs(value)), value)

    def __call__(self, value: float) -> float:
        d0, d1 = (self._sqrt(v) for v in self._domain)
        r0, r1 = self._range
        if d0 == d1:
            return r0 + (r1 - r0) / 2
        t = (self._sqrt(value) - d0) / (d1 - d0)
        return r0 + (r1 - r0) * t


class FlowRatioScale:
    """Quantizes a departure ratio in [0, 1] into one of three color levels.

    The domain is split into equal-width buckets; a value sitting exactly on a
    boundary belongs to the upper bucket.
    """

    LEVELS: tuple[float, ...] = (0.0, 0.5, 1.0)

    def __init__(self, domain: tuple[float, float] = (0.0, 1.0)) -> None:
        low, high = domain
        count = len(self.LEVELS)
        self._thresholds = [low + (high - low) * i / count for i in range(1, count)]

    @property
    def thresholds(self) -> list[float]:
        return list(self._thresholds)

    def __call__(self, ratio: float) -> float:
        return self.LEVELS[bisect_right(self._thresholds, ratio)]


def departure_ratio(station: Station) -> float:
    """Share of the station's traffic that departs; balanced when idle."""
    if not station.total_traffic:
        return BALANCED_RATIO
    return station.departures / station.total_traffic
