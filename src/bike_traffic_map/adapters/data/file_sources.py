"""Data sources that read the datasets from local files."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from bike_traffic_map.adapters.data.errors import DataSourceError
from bike_traffic_map.adapters.data.record_normalizer import (
    extract_station_records,
    normalize_stations,
    read_trip_csv,
)

if TYPE_CHECKING:
    from bike_traffic_map.domain.models import Station, Trip

logger = logging.getLogger(__name__)


async def _read_text(path: Path) -> str:
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8-sig")
    except OSError as e:
        raise DataSourceError(str(path), str(e)) from e
    except UnicodeDecodeError as e:
        raise DataSourceError(str(path), f"invalid UTF-8: {e}") from e


class FileStationSource:
    """Loads the station list from a local JSON file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    async def load_stations(self) -> list[Station]:
        text = await _read_text(self._path)
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise DataSourceError(str(self._path), f"invalid JSON: {e}") from e
        stations = normalize_stations(extract_station_records(payload))
        logger.info(f"Read {len(stations)} stations from {self._path}")
        return stations


class FileTripSource:
    """Loads the trip history from a local CSV file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    async def load_trips(self) -> list[Trip]:
        trips = read_trip_csv(await _read_text(self._path))
        logger.info(f"Read {len(trips)} trips from {self._path}")
        return trips
