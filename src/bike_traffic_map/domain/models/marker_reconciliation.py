"""Marker reconciliation result domain model."""

from pydantic import BaseModel, ConfigDict


class MarkerReconciliation(BaseModel):
    """Outcome of matching the previous marker set against the station list."""

    model_config = ConfigDict(frozen=True)

    entered: int
    updated: int
    exited: int

    @property
    def total(self) -> int:
        """Number of markers on the layer after reconciliation."""
        return self.entered + self.updated
