"""Offline flight data source returning fixed payloads."""

import asyncio
from typing import Optional

from gatewatch.exceptions import DataSourceError

SAMPLE_FLIGHT = "BN1985,ATL,LAX,OnTime,42"
SAMPLE_LOYALTY = "Gold,60000,40000"


class StaticSource:
    """Flight data source serving canned payloads, optionally after a delay."""

    def __init__(
        self,
        flight_payload: str = SAMPLE_FLIGHT,
        loyalty_payload: str = SAMPLE_LOYALTY,
        latency: float = 0.0,
        error: Optional[DataSourceError] = None,
    ):
        self.flight_payload = flight_payload
        self.loyalty_payload = loyalty_payload
        self.latency = latency
        self.error = error

    async def fetch_flight_info(self) -> str:
        return await self._serve(self.flight_payload)

    async def fetch_loyalty_info(self) -> str:
        return await self._serve(self.loyalty_payload)

    async def _serve(self, payload: str) -> str:
        if self.latency:
            await asyncio.sleep(self.latency)
        if self.error is not None:
            raise self.error
        return payload
