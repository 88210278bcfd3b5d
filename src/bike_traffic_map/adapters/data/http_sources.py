"""Data sources that download the datasets over HTTP."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import aiohttp

from bike_traffic_map.adapters.data.errors import DataSourceError
from bike_traffic_map.adapters.data.record_normalizer import (
    extract_station_records,
    normalize_stations,
    read_trip_csv,
)

if TYPE_CHECKING:
    from bike_traffic_map.domain.models import Station, Trip

logger = logging.getLogger(__name__)


class _HttpTextSource:
    """Fetches a URL as text using a shared aiohttp session."""

    def __init__(self, url: str, session: aiohttp.ClientSession, timeout_seconds: int = 30) -> None:
        self._url = url
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    @property
    def url(self) -> str:
        return self._url

    async def _fetch_text(self) -> str:
        try:
            async with self._session.get(self._url, timeout=self._timeout) as response:
                if response.status != 200:
                    raise DataSourceError(self._url, f"HTTP status {response.status}")
                return await response.text()
        except aiohttp.ClientError as e:
            raise DataSourceError(self._url, str(e)) from e
        except TimeoutError as e:
            raise DataSourceError(self._url, "request timed out") from e
        except UnicodeDecodeError as e:
            raise DataSourceError(self._url, f"invalid UTF-8: {e}") from e


class HttpStationSource(_HttpTextSource):
    """Loads the station list from a GBFS-style JSON document."""

    async def load_stations(self) -> list[Station]:
        text = await self._fetch_text()
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise DataSourceError(self._url, f"invalid JSON: {e}") from e
        stations = normalize_stations(extract_station_records(payload))
        logger.info(f"Fetched {len(stations)} stations from {self._url}")
        return stations


class HttpTripSource(_HttpTextSource):
    """Loads the trip history from a CSV document."""

    async def load_trips(self) -> list[Trip]:
        text = await self._fetch_text()
        trips = read_trip_csv(text)
        logger.info(f"Fetched {len(trips)} trips from {self._url}")
        return trips
