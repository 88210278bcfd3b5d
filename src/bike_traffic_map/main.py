"""Main entry point for the bike traffic map application."""

import asyncio
import logging
import sys

import aiohttp
from pydantic import ValidationError

from bike_traffic_map.adapters.config import AppConfig
from bike_traffic_map.adapters.data import DataSourceError, create_sources
from bike_traffic_map.adapters.web import PyViewWebAdapter
from bike_traffic_map.application.services import TrafficDatasetService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def load_config() -> AppConfig:
    """Load configuration from the environment and the optional TOML file."""
    try:
        config = AppConfig()
        config.load_toml_overrides()
    except (ValidationError, ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    return config


async def main() -> None:
    """Main application entry point."""
    config = load_config()

    async with aiohttp.ClientSession() as session:
        station_source, trip_source = create_sources(config, session)
        try:
            dataset = await TrafficDatasetService(station_source, trip_source).load()
        except DataSourceError as e:
            logger.error(str(e))
            sys.exit(1)

    if not dataset.stations:
        logger.warning("No stations loaded, the map will be empty")

    display_adapter = PyViewWebAdapter(dataset, config)
    try:
        await display_adapter.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await display_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
