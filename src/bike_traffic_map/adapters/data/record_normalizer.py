"""Normalization of raw station and trip records into domain models.

Source datasets differ in how they name identity and coordinate fields. All
of that is resolved here, once, so the core only ever sees ``Station`` and
``Trip``.
"""

import csv
import io
import logging
import math
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from bike_traffic_map.domain.models import Station, Trip

logger = logging.getLogger(__name__)

# Identity fields in order of preference; trips reference stations by these.
STATION_ID_FIELDS = ("short_name", "station_id")
LATITUDE_FIELDS = ("lat", "latitude")
LONGITUDE_FIELDS = ("lon", "longitude")


def _first_present(record: Mapping[str, Any], fields: Iterable[str]) -> Any:
    for field_name in fields:
        value = record.get(field_name)
        if value is not None and value != "":
            return value
    return None


def derive_station_id(record: Mapping[str, Any], index: int) -> str:
    """Stable identity for a station record.

    Uses ``short_name``, then ``station_id``, then the record's position as
    ``S{index}``.
    """
    value = _first_present(record, STATION_ID_FIELDS)
    if value is None:
        return f"S{index}"
    return str(value).strip() or f"S{index}"


def parse_coordinate(value: Any) -> float | None:
    """Parse a latitude or longitude; None when missing or not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 style timestamp such as '2024-03-01 08:10:00'."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        logger.debug(f"Unparseable timestamp: {value!r}")
        return None


def normalize_station(record: Mapping[str, Any], index: int) -> Station:
    """Map one raw station record onto the canonical Station."""
    station_id = derive_station_id(record, index)
    name = record.get("name")
    return Station(
        id=station_id,
        name=str(name) if name not in (None, "") else station_id,
        latitude=parse_coordinate(_first_present(record, LATITUDE_FIELDS)),
        longitude=parse_coordinate(_first_present(record, LONGITUDE_FIELDS)),
    )


def extract_station_records(payload: Any) -> list[Mapping[str, Any]]:
    """Find the list of station records in a decoded JSON document.

    Accepts GBFS ``{"data": {"stations": [...]}}``, ``{"stations": [...]}``
    or a bare list.
    """
    records: Any = payload
    if isinstance(records, dict) and isinstance(records.get("data"), dict):
        records = records["data"]
    if isinstance(records, dict):
        records = records.get("stations")
    if not isinstance(records, list):
        logger.warning("Station payload has no station list, loading zero stations")
        return []
    return [record for record in records if isinstance(record, Mapping)]


def normalize_stations(records: Iterable[Mapping[str, Any]]) -> list[Station]:
    """Normalize station records, keeping the first station per identity."""
    stations: list[Station] = []
    seen: set[str] = set()
    for index, record in enumerate(records):
        station = normalize_station(record, index)
        if station.id in seen:
            logger.warning(f"Duplicate station id {station.id!r} at record {index}, skipping")
            continue
        seen.add(station.id)
        stations.append(station)

    missing = sum(1 for station in stations if not station.has_coordinates)
    if missing:
        logger.info(f"{missing} station(s) without coordinates will be placed off-canvas")
    return stations


def _station_reference(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def normalize_trip(record: Mapping[str, Any]) -> Trip:
    """Map one raw trip record onto the canonical Trip."""
    return Trip(
        start_station_id=_station_reference(record.get("start_station_id")),
        end_station_id=_station_reference(record.get("end_station_id")),
        started_at=parse_timestamp(record.get("started_at")),
        ended_at=parse_timestamp(record.get("ended_at")),
    )


def normalize_trips(records: Iterable[Mapping[str, Any]]) -> list[Trip]:
    """Normalize trip records."""
    return [normalize_trip(record) for record in records]


def read_trip_csv(text: str) -> list[Trip]:
    """Parse trip history CSV text with a header row."""
    return normalize_trips(csv.DictReader(io.StringIO(text.removeprefix("\ufeff"))))
