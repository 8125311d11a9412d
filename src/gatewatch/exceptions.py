"""
Exceptions raised while fetching and tracking flights.

Hierarchy:
- GatewatchError
    - DataSourceError: an upstream fetch failed
    - ParseError: an upstream payload was malformed
    - BannedPassengerError: a passenger may not be tracked
    - PoolFailure: a worker failed, aborting the whole fetch-all
    - ConfigurationError: invalid settings
"""

from typing import Optional


class GatewatchError(Exception):
    """Base exception for all gatewatch errors."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class DataSourceError(GatewatchError):
    """Error when an upstream flight or loyalty fetch fails."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class ParseError(GatewatchError):
    """Error when a raw payload cannot be turned into a FlightStatus."""

    def __init__(self, message: str, payload: Optional[str] = None):
        self.payload = payload
        super().__init__(message)


class BannedPassengerError(GatewatchError):
    """Error when tracking is requested for a banned passenger."""

    def __init__(self, passenger_name: str):
        self.passenger_name = passenger_name
        super().__init__(
            f"Cannot track {passenger_name}'s flight. They are banned from the airport."
        )


class PoolFailure(GatewatchError):
    """A worker failed; the fetch-all operation is aborted as a whole."""

    def __init__(self, message: str, passenger_name: Optional[str] = None):
        self.passenger_name = passenger_name
        super().__init__(message)


class ConfigurationError(GatewatchError):
    """Error with tracker configuration."""
    pass


__all__ = [
    "GatewatchError",
    "DataSourceError",
    "ParseError",
    "BannedPassengerError",
    "PoolFailure",
    "ConfigurationError",
]
