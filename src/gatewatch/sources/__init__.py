"""Pluggable flight data sources."""

from gatewatch.sources.base import FlightDataSource
from gatewatch.sources.bignerdranch import BigNerdRanchSource
from gatewatch.sources.static import StaticSource

__all__ = ["BigNerdRanchSource", "FlightDataSource", "StaticSource"]
