"""Errors raised by the data source adapters."""


class DataSourceError(Exception):
    """Raised when a dataset cannot be fetched, read or decoded."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"Failed to load {location}: {reason}")
        self.location = location
        self.reason = reason
