"""Pytest configuration and fixtures."""

import asyncio
import sys
from pathlib import Path

import pytest

# Ensure src is on path when running tests without installed package
src = Path(__file__).resolve().parent.parent / "src"
if src.exists() and str(src) not in sys.path:
    sys.path.insert(0, str(src))

from gatewatch.config import TrackerSettings  # noqa: E402
from gatewatch.exceptions import DataSourceError  # noqa: E402
from gatewatch.observers import TrackerObserver  # noqa: E402


class CountingSource:
    """Fake data source that counts calls, tracks concurrency and can fail."""

    def __init__(
        self,
        flight_payload: str = "BN1985,ATL,LAX,OnTime,2",
        loyalty_payload: str = "Gold,60000,40000",
        latency: float = 0.0,
        fail_on_call: int = 0,
    ):
        self.flight_payload = flight_payload
        self.loyalty_payload = loyalty_payload
        self.latency = latency
        self.fail_on_call = fail_on_call
        self.flight_calls = 0
        self.loyalty_calls = 0
        self.active = 0
        self.max_active = 0

    async def fetch_flight_info(self) -> str:
        self.flight_calls += 1
        call = self.flight_calls
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.latency:
                await asyncio.sleep(self.latency)
            if call == self.fail_on_call:
                raise DataSourceError(f"flight call {call} failed", status_code=503)
            return self.flight_payload
        finally:
            self.active -= 1

    async def fetch_loyalty_info(self) -> str:
        self.loyalty_calls += 1
        if self.latency:
            await asyncio.sleep(self.latency)
        return self.loyalty_payload


class RecordingObserver(TrackerObserver):
    """Observer that records every notification in order."""

    def __init__(self):
        self.events = []

    def fetch_started(self, passenger_names):
        self.events.append(("fetch_started", list(passenger_names)))

    def flight_fetched(self, flight):
        self.events.append(("flight_fetched", flight.passenger_name))

    def fetch_finished(self, board):
        self.events.append(("fetch_finished", len(board)))

    def fetch_failed(self, error):
        self.events.append(("fetch_failed", type(error).__name__))

    def status_message(self, passenger_name, message):
        self.events.append(("status", passenger_name, message))

    def flights_remaining(self, count):
        self.events.append(("remaining", count))

    def tracking_failed(self, passenger_name, error):
        self.events.append(("failed", passenger_name, type(error).__name__))

    def tracking_finished(self, passenger_name):
        self.events.append(("finished", passenger_name))

    def all_tracking_finished(self):
        self.events.append(("all_finished",))

    def of(self, kind):
        return [e for e in self.events if e[0] == kind]


@pytest.fixture
def fast_settings() -> TrackerSettings:
    return TrackerSettings(settle_delay=0.0, tick_interval=0.0)


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


def run(coro):
    """Run a coroutine to completion on a fresh event loop."""
    return asyncio.run(coro)
