"""CLI for tracking flights."""

import argparse
import asyncio
import sys
from dataclasses import replace

from tqdm import tqdm

from gatewatch.config import TrackerSettings
from gatewatch.exceptions import GatewatchError
from gatewatch.logger import setup_logger
from gatewatch.models import FlightBoard, FlightStatus
from gatewatch.observers import TrackerObserver
from gatewatch.sources.bignerdranch import BigNerdRanchSource
from gatewatch.sources.static import StaticSource
from gatewatch.tracker import FlightTracker


class ConsoleObserver(TrackerObserver):
    """Prints tracking progress to stdout, with a progress bar while fetching."""

    def __init__(self):
        self._progress = None

    def fetch_started(self, passenger_names):
        print("Getting the latest flight info...")
        self._progress = tqdm(total=len(passenger_names), desc="Fetching flights", unit="flight")

    def flight_fetched(self, flight: FlightStatus):
        if self._progress is not None:
            self._progress.update(1)

    def fetch_finished(self, board: FlightBoard):
        self._close_progress()
        df = board.to_dataframe()
        if df.empty:
            print("No flights found.", file=sys.stderr)
            return
        print(f"Found flights for {board.describe()}")
        print(df.to_string(index=False))

    def fetch_failed(self, error):
        self._close_progress()

    def status_message(self, passenger_name, message):
        print(f"{passenger_name}: {message}")

    def flights_remaining(self, count):
        print(f"There are {count} flights being tracked")

    def tracking_failed(self, passenger_name, error):
        print(f"Error: {error}", file=sys.stderr)

    def tracking_finished(self, passenger_name):
        print(f"Finished tracking {passenger_name}'s flight")

    def all_tracking_finished(self):
        print("Finished tracking all flights")

    def _close_progress(self):
        if self._progress is not None:
            self._progress.close()
            self._progress = None


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Fetch flight status for passengers and follow each boarding countdown"
    )
    parser.add_argument(
        "--passenger",
        "-p",
        action="append",
        dest="passengers",
        help="Passenger name (repeatable). Default: GATEWATCH_PASSENGERS or the sample list",
    )
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        help="Number of concurrent fetch workers",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Use canned payloads instead of the HTTP API",
    )
    parser.add_argument(
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser.parse_args(argv)


def build_settings(args) -> TrackerSettings:
    settings = TrackerSettings.from_env()
    overrides = {}
    if args.passengers:
        overrides["passenger_names"] = args.passengers
    if args.workers is not None:
        overrides["worker_count"] = args.workers
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    return replace(settings, **overrides) if overrides else settings


def main(argv=None):
    args = parse_args(argv)

    try:
        settings = build_settings(args)
    except GatewatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logger(log_level=settings.log_level)

    if args.offline:
        source = StaticSource()
    else:
        source = BigNerdRanchSource(base_url=settings.base_url, timeout=settings.timeout)

    tracker = FlightTracker(source, settings=settings, observer=ConsoleObserver())
    try:
        asyncio.run(tracker.run())
    except GatewatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
