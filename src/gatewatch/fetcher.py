"""Fetch one passenger's flight from both upstream feeds at once."""

import asyncio

from gatewatch.exceptions import DataSourceError, GatewatchError
from gatewatch.logger import logger
from gatewatch.models import FlightStatus
from gatewatch.sources.base import FlightDataSource


class ParallelFetcher:
    """Runs the flight and loyalty calls concurrently and merges the results."""

    def __init__(self, source: FlightDataSource, settle_delay: float = 0.5):
        self._source = source
        self.settle_delay = settle_delay

    async def fetch(self, passenger_name: str) -> FlightStatus:
        """
        Fetch and parse the flight status for passenger_name.

        Takes at least settle_delay seconds; the delay never cuts a slow
        call short. If either call fails, no partial result is returned.
        """
        try:
            async with asyncio.TaskGroup() as tg:
                flight_task = tg.create_task(
                    self._fetch("flight info", self._source.fetch_flight_info)
                )
                loyalty_task = tg.create_task(
                    self._fetch("loyalty info", self._source.fetch_loyalty_info)
                )
                await asyncio.sleep(self.settle_delay)
        except ExceptionGroup as eg:
            first = eg.exceptions[0]
            if isinstance(first, GatewatchError):
                raise first
            raise DataSourceError(
                f"Fetching {passenger_name}'s flight failed: {first}"
            ) from first

        return FlightStatus.parse(
            passenger_name=passenger_name,
            flight_response=flight_task.result(),
            loyalty_response=loyalty_task.result(),
        )

    async def _fetch(self, what: str, call) -> str:
        logger.debug(f"Started fetching {what}")
        payload = await call()
        logger.debug(f"Finished fetching {what}")
        return payload
