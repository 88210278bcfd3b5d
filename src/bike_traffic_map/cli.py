"""CLI for summarizing station traffic without starting the web server."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp
from pydantic import ValidationError

from bike_traffic_map.adapters.config import AppConfig
from bike_traffic_map.adapters.data import DataSourceError, create_sources
from bike_traffic_map.adapters.formatters import ClockFormatter
from bike_traffic_map.application.services import (
    FlowRatioScale,
    TrafficDatasetService,
    aggregate_station_traffic,
    departure_ratio,
    select_trips,
)
from bike_traffic_map.domain.models import NO_TIME_FILTER, TrafficDataset

logger = logging.getLogger(__name__)


def parse_clock_time(value: str) -> int:
    """Parse 'HH:MM' into minutes since midnight (argparse type)."""
    parts = value.strip().split(":")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected HH:MM, got {value!r}")
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected HH:MM, got {value!r}") from None
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise argparse.ArgumentTypeError(f"time out of range: {value!r}")
    return hours * 60 + minutes


def summarize_traffic(
    dataset: TrafficDataset, minute: int, window_minutes: int, top: int
) -> list[dict[str, Any]]:
    """Busiest stations for the given minute of the day (or the whole day)."""
    stations = dataset.clone_stations()
    aggregate_station_traffic(stations, select_trips(dataset.trips, minute, window_minutes))
    flow = FlowRatioScale()
    ranked = sorted(stations, key=lambda s: (-s.total_traffic, s.id))
    return [
        {
            "id": station.id,
            "name": station.name,
            "total": station.total_traffic,
            "departures": station.departures,
            "arrivals": station.arrivals,
            "flow": flow(departure_ratio(station)),
        }
        for station in ranked[:top]
    ]


def print_summary(rows: list[dict[str, Any]], label: str) -> None:
    """Print a summary table."""
    print(f"Busiest stations ({label}):")
    print("=" * 80)
    if not rows:
        print("No stations.")
        return
    for row in rows:
        print(
            f"{row['total']:>6}  {row['name']} [{row['id']}]  "
            f"{row['departures']} departures, {row['arrivals']} arrivals, flow {row['flow']}"
        )


async def load_dataset(config: AppConfig) -> TrafficDataset:
    """Load the configured dataset."""
    async with aiohttp.ClientSession() as session:
        station_source, trip_source = create_sources(config, session)
        return await TrafficDatasetService(station_source, trip_source).load()


async def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Summarize bike-share station traffic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Busiest stations over the whole day
  bike-traffic-map-cli summary

  # Busiest stations within an hour of 8:00
  bike-traffic-map-cli summary --time 08:00 --top 5
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    summary_parser = subparsers.add_parser("summary", help="Show the busiest stations")
    summary_parser.add_argument(
        "--time", type=parse_clock_time, default=None, help="Time of day as HH:MM"
    )
    summary_parser.add_argument("--top", type=int, default=10, help="Number of stations")
    summary_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)

    try:
        config = AppConfig()
        config.load_toml_overrides()
    except (ValidationError, ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        dataset = await load_dataset(config)
    except DataSourceError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    minute = NO_TIME_FILTER if args.time is None else args.time
    rows = summarize_traffic(dataset, minute, config.window_minutes, args.top)

    if args.json:
        print(json.dumps(rows, indent=2, ensure_ascii=False))
        return

    label = "all day" if args.time is None else ClockFormatter(config).format_minute(args.time)
    print_summary(rows, label)


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
