"""State for the traffic map LiveView."""

from .traffic_map_session import TrafficMapSession
from .traffic_map_state import TrafficMapState

__all__ = ["TrafficMapSession", "TrafficMapState"]
