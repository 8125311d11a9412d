"""Data models for flight tracking."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional

from gatewatch.exceptions import ParseError

# Boarding opens for everyone this many minutes before departure
BOARDING_OPENS = 60
# Doors close this many minutes before departure
BOARDING_CLOSES = 15


class BoardingState(Enum):
    """Boarding state of a tracked flight."""

    FLIGHT_CANCELED = "FlightCanceled"
    BOARDING_NOT_STARTED = "BoardingNotStarted"
    WAITING_TO_BOARD = "WaitingToBoard"
    BOARDING = "Boarding"
    BOARDING_ENDED = "BoardingEnded"


class LoyaltyTier(Enum):
    """Loyalty tier and the minute at which its members may start boarding."""

    BRONZE = ("Bronze", 25)
    SILVER = ("Silver", 25)
    GOLD = ("Gold", 30)
    PLATINUM = ("Platinum", 35)
    TITANIUM = ("Titanium", 40)
    DIAMOND = ("Diamond", 45)

    def __init__(self, tier_name: str, boarding_window_start: int):
        self.tier_name = tier_name
        self.boarding_window_start = boarding_window_start

    @classmethod
    def from_name(cls, name: str) -> "LoyaltyTier":
        for tier in cls:
            if tier.tier_name.lower() == name.strip().lower():
                return tier
        raise ParseError(f"Unknown loyalty tier: {name!r}", payload=name)


def derive_boarding_state(
    status: str, departure_time_in_minutes: int, loyalty_tier: LoyaltyTier
) -> BoardingState:
    """Work out the boarding state from the raw status, the clock and the tier."""
    if status.strip().lower() == "canceled":
        return BoardingState.FLIGHT_CANCELED
    if departure_time_in_minutes < BOARDING_CLOSES:
        return BoardingState.BOARDING_ENDED
    if departure_time_in_minutes <= loyalty_tier.boarding_window_start:
        return BoardingState.BOARDING
    if departure_time_in_minutes <= BOARDING_OPENS:
        return BoardingState.WAITING_TO_BOARD
    return BoardingState.BOARDING_NOT_STARTED


@dataclass(frozen=True)
class FlightStatus:
    """Immutable snapshot of one passenger's flight."""

    passenger_name: str
    flight_number: str
    departure_time_in_minutes: int
    boarding_status: BoardingState
    origin_airport: Optional[str] = None
    destination_airport: Optional[str] = None
    status: Optional[str] = None
    loyalty_tier: Optional[LoyaltyTier] = None

    def __post_init__(self):
        if self.departure_time_in_minutes < -1:
            raise ValueError(
                f"departure_time_in_minutes must be >= -1, got {self.departure_time_in_minutes}"
            )

    @property
    def is_flight_canceled(self) -> bool:
        return self.boarding_status is BoardingState.FLIGHT_CANCELED

    def tick(self) -> "FlightStatus":
        """Return the snapshot one minute closer to departure."""
        minutes = self.departure_time_in_minutes - 1
        boarding_status = self.boarding_status
        # Parsed flights follow the clock; canceled is terminal
        if not self.is_flight_canceled and self.loyalty_tier is not None:
            boarding_status = derive_boarding_state(
                self.status or "", minutes, self.loyalty_tier
            )
        return replace(
            self,
            departure_time_in_minutes=minutes,
            boarding_status=boarding_status,
        )

    def describe(self) -> str:
        return f"{self.passenger_name} ({self.flight_number})"

    @classmethod
    def parse(
        cls, passenger_name: str, flight_response: str, loyalty_response: str
    ) -> "FlightStatus":
        """
        Build a FlightStatus from the two upstream payloads.

        flight_response: 'flightNumber,origin,destination,status,departureTimeInMinutes'
        loyalty_response: 'tierName,milesFlown,milesToNextTier'
        """
        flight_fields = _split_fields(flight_response, 5, "flight")
        flight_number, origin, destination, status, minutes_str = flight_fields
        tier_name, miles_flown, miles_to_next = _split_fields(loyalty_response, 3, "loyalty")

        minutes = _to_int(minutes_str, flight_response)
        _to_int(miles_flown, loyalty_response)
        _to_int(miles_to_next, loyalty_response)
        if minutes < -1:
            raise ParseError(
                f"Departure time out of range: {minutes}", payload=flight_response
            )
        tier = LoyaltyTier.from_name(tier_name)

        return cls(
            passenger_name=passenger_name,
            flight_number=flight_number,
            departure_time_in_minutes=minutes,
            boarding_status=derive_boarding_state(status, minutes, tier),
            origin_airport=origin,
            destination_airport=destination,
            status=status,
            loyalty_tier=tier,
        )


def _split_fields(payload: str, expected: int, kind: str) -> List[str]:
    if not isinstance(payload, str):
        raise ParseError(f"Malformed {kind} payload: expected text", payload=repr(payload))
    parts = [p.strip() for p in payload.strip().split(",")]
    if len(parts) != expected or not all(parts):
        raise ParseError(
            f"Malformed {kind} payload: expected {expected} fields, got {payload!r}",
            payload=payload,
        )
    return parts


def _to_int(value: str, payload: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ParseError(f"Expected an integer, got {value!r}", payload=payload) from None


@dataclass
class FlightBoard:
    """Flights returned by a fetch-all, in completion order."""

    flights: List[FlightStatus] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.flights)

    def __iter__(self):
        return iter(self.flights)

    def describe(self) -> str:
        """Return 'Name (FLIGHT), ...' for every flight."""
        return ", ".join(f.describe() for f in self.flights)

    def to_dataframe(self):
        """Convert to pandas DataFrame."""
        import pandas as pd

        columns = [
            "passenger_name",
            "flight_number",
            "origin_airport",
            "destination_airport",
            "departure_time_in_minutes",
            "boarding_status",
            "loyalty_tier",
        ]
        if not self.flights:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame(
            [
                {
                    "passenger_name": f.passenger_name,
                    "flight_number": f.flight_number,
                    "origin_airport": f.origin_airport,
                    "destination_airport": f.destination_airport,
                    "departure_time_in_minutes": f.departure_time_in_minutes,
                    "boarding_status": f.boarding_status.value,
                    "loyalty_tier": f.loyalty_tier.tier_name if f.loyalty_tier else None,
                }
                for f in self.flights
            ],
            columns=columns,
        )
