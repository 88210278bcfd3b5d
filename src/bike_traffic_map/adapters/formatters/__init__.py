"""Formatters shared by the web adapter and the CLI."""

from bike_traffic_map.adapters.formatters.clock_formatter import ClockFormatter

__all__ = ["ClockFormatter"]
