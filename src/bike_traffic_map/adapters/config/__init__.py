"""Configuration adapters."""

from bike_traffic_map.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
