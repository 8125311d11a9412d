"""Per-flight boarding countdown."""

import asyncio
from typing import AsyncIterator, Callable, Dict, FrozenSet, Optional

from gatewatch.config import DEFAULT_BANNED
from gatewatch.exceptions import BannedPassengerError
from gatewatch.models import BoardingState, FlightStatus
from gatewatch.streams import with_completion

BOARDING_MESSAGES: Dict[BoardingState, str] = {
    BoardingState.FLIGHT_CANCELED: "Your flight was canceled",
    BoardingState.BOARDING_NOT_STARTED: "Boarding will start soon",
    BoardingState.WAITING_TO_BOARD: "Other passengers are boarding",
    BoardingState.BOARDING: "You can now board the plane",
    BoardingState.BOARDING_ENDED: "The boarding doors have closed",
}


def boarding_message(flight: FlightStatus) -> str:
    """Human-readable boarding message with the minutes left."""
    return (
        f"{BOARDING_MESSAGES[flight.boarding_status]} "
        f"(Flight departs in {flight.departure_time_in_minutes} minutes)"
    )


class FlightCountdownStream:
    """Emits a flight's status once per tick until it departs or is canceled."""

    def __init__(
        self,
        tick_interval: float = 0.4,
        banned_passengers: FrozenSet[str] = DEFAULT_BANNED,
    ):
        self.tick_interval = tick_interval
        self.banned_passengers = frozenset(banned_passengers)

    async def watch(self, flight: FlightStatus) -> AsyncIterator[FlightStatus]:
        """
        Yield flight, then a copy one minute closer, every tick_interval.

        Stops once the departure time drops below zero or the flight is
        canceled. Raises BannedPassengerError on the first pull, before
        anything is yielded, if the passenger is banned.
        """
        if flight.passenger_name in self.banned_passengers:
            raise BannedPassengerError(flight.passenger_name)

        while flight.departure_time_in_minutes >= 0 and not flight.is_flight_canceled:
            yield flight
            await asyncio.sleep(self.tick_interval)
            flight = flight.tick()

    def messages(
        self,
        flight: FlightStatus,
        on_completion: Optional[Callable[[], None]] = None,
    ) -> AsyncIterator[str]:
        """Boarding messages for flight; on_completion runs once when they stop."""
        return with_completion(self._messages(flight), on_completion)

    async def _messages(self, flight: FlightStatus) -> AsyncIterator[str]:
        statuses = self.watch(flight)
        try:
            async for status in statuses:
                yield boarding_message(status)
        finally:
            await statuses.aclose()
