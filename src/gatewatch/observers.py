"""Hooks through which a tracking run reports progress."""

from typing import List

from gatewatch.logger import logger
from gatewatch.models import FlightBoard, FlightStatus


class TrackerObserver:
    """Receives progress notifications. Every hook is optional."""

    def fetch_started(self, passenger_names: List[str]) -> None:
        pass

    def flight_fetched(self, flight: FlightStatus) -> None:
        pass

    def fetch_finished(self, board: FlightBoard) -> None:
        pass

    def fetch_failed(self, error: Exception) -> None:
        pass

    def status_message(self, passenger_name: str, message: str) -> None:
        pass

    def flights_remaining(self, count: int) -> None:
        pass

    def tracking_failed(self, passenger_name: str, error: Exception) -> None:
        pass

    def tracking_finished(self, passenger_name: str) -> None:
        pass

    def all_tracking_finished(self) -> None:
        pass


class LoggingObserver(TrackerObserver):
    """Writes every notification to the log."""

    def fetch_started(self, passenger_names: List[str]) -> None:
        logger.info("Getting the latest flight info...")

    def flight_fetched(self, flight: FlightStatus) -> None:
        logger.debug(f"Fetched flight for {flight.describe()}")

    def fetch_finished(self, board: FlightBoard) -> None:
        logger.info(f"Found flights for {board.describe()}")

    def fetch_failed(self, error: Exception) -> None:
        logger.error(f"Fetching flights failed: {error}")

    def status_message(self, passenger_name: str, message: str) -> None:
        logger.info(f"{passenger_name}: {message}")

    def flights_remaining(self, count: int) -> None:
        logger.info(f"There are {count} flights being tracked")

    def tracking_failed(self, passenger_name: str, error: Exception) -> None:
        logger.error(f"Tracking {passenger_name}'s flight failed: {error}")

    def tracking_finished(self, passenger_name: str) -> None:
        logger.info(f"Finished tracking {passenger_name}'s flight")

    def all_tracking_finished(self) -> None:
        logger.info("Finished tracking all flights")
