"""Domain contracts (protocols) used across layers."""

from bike_traffic_map.domain.contracts.clock_formatter import ClockFormatterProtocol

__all__ = ["ClockFormatterProtocol"]
