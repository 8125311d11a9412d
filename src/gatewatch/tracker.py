"""Tracker - fetches every flight, then follows each countdown to the end."""

import asyncio
from contextlib import aclosing
from typing import Iterable, Optional

from gatewatch.config import TrackerSettings
from gatewatch.countdown import FlightCountdownStream
from gatewatch.exceptions import BannedPassengerError, GatewatchError
from gatewatch.fetcher import ParallelFetcher
from gatewatch.gate import GateCounter, Subscription
from gatewatch.models import FlightBoard, FlightStatus
from gatewatch.observers import LoggingObserver, TrackerObserver
from gatewatch.pool import WorkerPool
from gatewatch.sources.base import FlightDataSource


class FlightTracker:
    """Orchestrates fetching, countdowns and the gate counter."""

    def __init__(
        self,
        source: FlightDataSource,
        settings: Optional[TrackerSettings] = None,
        observer: Optional[TrackerObserver] = None,
    ):
        self.settings = settings or TrackerSettings()
        self.observer = observer or LoggingObserver()
        self.fetcher = ParallelFetcher(source, settle_delay=self.settings.settle_delay)
        self.pool = WorkerPool(self.fetcher, on_result=self.observer.flight_fetched)
        self.countdown = FlightCountdownStream(
            tick_interval=self.settings.tick_interval,
            banned_passengers=self.settings.banned_passengers,
        )

    async def run(
        self,
        passenger_names: Optional[Iterable[str]] = None,
        worker_count: Optional[int] = None,
    ) -> FlightBoard:
        """
        Fetch all flights, then track them until every countdown is over.

        Counts are reported while the countdowns run one after another.
        A PoolFailure from the fetch aborts the run.
        """
        names = list(self.settings.passenger_names if passenger_names is None else passenger_names)
        workers = self.settings.worker_count if worker_count is None else worker_count

        self.observer.fetch_started(names)
        try:
            board = await self.pool.fetch_all(names, worker_count=workers)
        except GatewatchError as e:
            self.observer.fetch_failed(e)
            raise
        self.observer.fetch_finished(board)

        counter = GateCounter(len(board))
        counts = counter.subscribe(on_completion=self.observer.all_tracking_finished)
        # Detached on exit even if the reporter never ran
        async with aclosing(counts):
            try:
                async with asyncio.TaskGroup() as tg:
                    tg.create_task(self._report_counts(counts), name="gate-reporter")
                    tg.create_task(self._track_all(board, counter), name="countdown-driver")
            except ExceptionGroup as eg:
                raise eg.exceptions[0]
        return board

    async def track(self, flight: FlightStatus) -> None:
        """Follow one flight's countdown to its end."""
        name = flight.passenger_name
        messages = self.countdown.messages(
            flight, on_completion=lambda: self.observer.tracking_finished(name)
        )
        async with aclosing(messages):
            async for message in messages:
                self.observer.status_message(name, message)

    async def _report_counts(self, counts: Subscription) -> None:
        async for count in counts:
            self.observer.flights_remaining(count)

    async def _track_all(self, board: FlightBoard, counter: GateCounter) -> None:
        # Sole writer of the counter
        for flight in board:
            try:
                await self.track(flight)
            except BannedPassengerError as e:
                self.observer.tracking_failed(flight.passenger_name, e)
            finally:
                counter.decrement()
