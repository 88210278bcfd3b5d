"""Protocol for formatting the selected time of day."""

from typing import Protocol


class ClockFormatterProtocol(Protocol):
    """Protocol for turning a minute of the day into a clock label."""

    def format_minute(self, minute: int) -> str:
        """Format a minute of the day.

        Args:
            minute: Minutes since midnight, 0..1439.

        Returns:
            A short clock string such as "8:10 AM".
        """
        ...
