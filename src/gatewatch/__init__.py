"""Concurrent flight status fetching and boarding countdown tracking."""

from gatewatch.config import TrackerSettings
from gatewatch.countdown import FlightCountdownStream, boarding_message
from gatewatch.exceptions import (
    BannedPassengerError,
    ConfigurationError,
    DataSourceError,
    GatewatchError,
    ParseError,
    PoolFailure,
)
from gatewatch.fetcher import ParallelFetcher
from gatewatch.gate import GateCounter
from gatewatch.models import BoardingState, FlightBoard, FlightStatus, LoyaltyTier
from gatewatch.observers import LoggingObserver, TrackerObserver
from gatewatch.pool import WorkerPool
from gatewatch.tracker import FlightTracker

__all__ = [
    "BannedPassengerError",
    "BoardingState",
    "ConfigurationError",
    "DataSourceError",
    "FlightBoard",
    "FlightCountdownStream",
    "FlightStatus",
    "FlightTracker",
    "GateCounter",
    "GatewatchError",
    "LoggingObserver",
    "LoyaltyTier",
    "ParallelFetcher",
    "ParseError",
    "PoolFailure",
    "TrackerObserver",
    "TrackerSettings",
    "WorkerPool",
    "boarding_message",
]
