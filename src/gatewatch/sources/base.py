"""Abstract interface for flight data sources."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class FlightDataSource(Protocol):
    """Protocol for the two upstream feeds a flight status is built from."""

    async def fetch_flight_info(self) -> str:
        """Fetch the raw flight payload. Raises DataSourceError on failure."""
        ...

    async def fetch_loyalty_info(self) -> str:
        """Fetch the raw loyalty payload. Raises DataSourceError on failure."""
        ...
