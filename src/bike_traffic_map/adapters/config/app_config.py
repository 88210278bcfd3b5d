"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bike_traffic_map.domain.models import TrafficMapSettings

DEFAULT_STATIONS_URL = "https://dsc106.com/labs/lab07/data/bluebikes-stations.json"
DEFAULT_TRIPS_URL = "https://dsc106.com/labs/lab07/data/bluebikes-traffic-2024-03.csv"
DEFAULT_BIKE_LANE_SOURCES = [
    "https://bostonopendata-boston.opendata.arcgis.com/datasets/boston::existing-bike-network-2022.geojson",
    "https://raw.githubusercontent.com/cambridgegis/cambridgegis_data/main/Recreation/Bike_Facilities/RECREATION_BikeFacilities.geojson",
]

# TOML section -> fields it may override
_TOML_SECTIONS: dict[str, tuple[str, ...]] = {
    "data": (
        "stations_url",
        "trips_url",
        "stations_file",
        "trips_file",
        "http_timeout_seconds",
    ),
    "map": (
        "map_style",
        "map_center_longitude",
        "map_center_latitude",
        "map_zoom",
        "map_min_zoom",
        "map_max_zoom",
        "viewport_width",
        "viewport_height",
        "bike_lane_sources",
    ),
    "display": (
        "title",
        "window_minutes",
        "unfiltered_max_radius",
        "filtered_min_radius",
        "filtered_max_radius",
        "clock_format",
    ),
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    title: str = Field(default="Bluebikes Traffic", description="Page title")

    # Data sources
    stations_url: str = Field(
        default=DEFAULT_STATIONS_URL, description="URL of the station list (GBFS JSON)"
    )
    trips_url: str = Field(default=DEFAULT_TRIPS_URL, description="URL of the trip history CSV")
    stations_file: str | None = Field(
        default=None, description="Local station JSON file; takes precedence over stations_url"
    )
    trips_file: str | None = Field(
        default=None, description="Local trip CSV file; takes precedence over trips_url"
    )
    http_timeout_seconds: int = Field(
        default=30, description="Timeout for data downloads in seconds"
    )

    # Map configuration
    mapbox_access_token: str = Field(default="", description="Mapbox access token for the basemap")
    map_style: str = Field(
        default="mapbox://styles/mapbox/streets-v12", description="Mapbox style URL"
    )
    map_center_longitude: float = Field(default=-71.09415, description="Initial map center")
    map_center_latitude: float = Field(default=42.36027, description="Initial map center")
    map_zoom: float = Field(default=12, description="Initial zoom level")
    map_min_zoom: float = Field(default=5, description="Minimum zoom level")
    map_max_zoom: float = Field(default=18, description="Maximum zoom level")
    viewport_width: int = Field(
        default=1024, description="Assumed map width in pixels until the browser reports it"
    )
    viewport_height: int = Field(
        default=768, description="Assumed map height in pixels until the browser reports it"
    )
    bike_lane_sources: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BIKE_LANE_SOURCES),
        description="GeoJSON line layers drawn on the basemap",
    )

    # Display configuration
    window_minutes: int = Field(
        default=60, description="Half-width of the time window around the selected minute"
    )
    unfiltered_max_radius: float = Field(
        default=25, description="Largest marker radius when showing the whole day"
    )
    filtered_min_radius: float = Field(
        default=3, description="Smallest marker radius while a time filter is active"
    )
    filtered_max_radius: float = Field(
        default=50, description="Largest marker radius while a time filter is active"
    )
    clock_format: str = Field(default="12h", description="Clock label format: '12h' or '24h'")

    config_file: str | None = Field(
        default=None, description="Optional TOML file overriding the settings above"
    )

    @field_validator("clock_format")
    @classmethod
    def validate_clock_format(cls, v: str) -> str:
        """Validate clock format is either '12h' or '24h'."""
        if v.lower() not in ("12h", "24h"):
            raise ValueError("clock_format must be either '12h' or '24h'")
        return v.lower()

    @field_validator("window_minutes")
    @classmethod
    def validate_window_minutes(cls, v: int) -> int:
        """Validate the time window is not negative."""
        if v < 0:
            raise ValueError("window_minutes must not be negative")
        return v

    @model_validator(mode="after")
    def validate_ranges(self) -> "AppConfig":
        """Validate zoom limits and the filtered radius range."""
        if self.map_min_zoom > self.map_max_zoom:
            raise ValueError("map_min_zoom must not exceed map_max_zoom")
        if self.filtered_min_radius > self.filtered_max_radius:
            raise ValueError("filtered_min_radius must not exceed filtered_max_radius")
        return self

    def load_toml_overrides(self) -> dict[str, Any]:
        """Apply [data], [map] and [display] sections from config_file.

        Returns the parsed TOML document. Does nothing when config_file is unset.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        overrides: dict[str, Any] = {}
        for section, fields in _TOML_SECTIONS.items():
            values = toml_data.get(section)
            if not isinstance(values, dict):
                continue
            overrides.update({name: values[name] for name in fields if name in values})

        # Range checks compare fields that may come from the same file, so validate once
        merged = type(self).model_validate({**self.model_dump(), **overrides})
        for field_name in overrides:
            setattr(self, field_name, getattr(merged, field_name))

        return toml_data

    def to_traffic_map_settings(self) -> TrafficMapSettings:
        """Windowing and radius settings for the map controller."""
        return TrafficMapSettings(
            window_minutes=self.window_minutes,
            unfiltered_radius_range=(0.0, float(self.unfiltered_max_radius)),
            filtered_radius_range=(
                float(self.filtered_min_radius),
                float(self.filtered_max_radius),
            ),
        )
