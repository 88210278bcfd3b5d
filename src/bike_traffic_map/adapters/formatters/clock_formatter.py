"""Formatter for the selected time-of-day label."""

from bike_traffic_map.adapters.config.app_config import AppConfig
from bike_traffic_map.domain.contracts.clock_formatter import ClockFormatterProtocol
from bike_traffic_map.domain.models import MINUTES_PER_DAY


class ClockFormatter(ClockFormatterProtocol):
    """Formats a minute of the day as a short clock string."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with the clock format setting.
        """
        self.config = config

    def format_minute(self, minute: int) -> str:
        """Format minutes since midnight, e.g. '8:10 AM' or '08:10'."""
        hours, minutes = divmod(minute % MINUTES_PER_DAY, 60)
        if self.config.clock_format == "24h":
            return f"{hours:02d}:{minutes:02d}"
        suffix = "AM" if hours < 12 else "PM"
        return f"{hours % 12 or 12}:{minutes:02d} {suffix}"
