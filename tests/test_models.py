"""Unit tests for flight status models."""

import pytest

from gatewatch.exceptions import ParseError
from gatewatch.models import (
    BoardingState,
    FlightBoard,
    FlightStatus,
    LoyaltyTier,
    derive_boarding_state,
)


def _flight(minutes: int = 2, state: BoardingState = BoardingState.BOARDING, **kwargs) -> FlightStatus:
    return FlightStatus(
        passenger_name=kwargs.pop("passenger_name", "Madrigal"),
        flight_number=kwargs.pop("flight_number", "BN1985"),
        departure_time_in_minutes=minutes,
        boarding_status=state,
        **kwargs,
    )


class TestParse:
    """Tests for FlightStatus.parse."""

    def test_parse_fields(self) -> None:
        f = FlightStatus.parse("Madrigal", "BN1985,ATL,LAX,OnTime,120", "Gold,60000,40000")
        assert f.passenger_name == "Madrigal"
        assert f.flight_number == "BN1985"
        assert f.origin_airport == "ATL"
        assert f.destination_airport == "LAX"
        assert f.departure_time_in_minutes == 120
        assert f.loyalty_tier is LoyaltyTier.GOLD
        assert f.boarding_status is BoardingState.BOARDING_NOT_STARTED
        assert f.is_flight_canceled is False

    def test_parse_canceled(self) -> None:
        f = FlightStatus.parse("Madrigal", "BN1985,ATL,LAX,canceled,30", "Bronze,10,20")
        assert f.boarding_status is BoardingState.FLIGHT_CANCELED
        assert f.is_flight_canceled is True

    def test_parse_is_deterministic(self) -> None:
        a = FlightStatus.parse("Taernyl", "BN1,ATL,LAX,OnTime,40", "Diamond,1,2")
        b = FlightStatus.parse("Taernyl", "BN1,ATL,LAX,OnTime,40", "Diamond,1,2")
        assert a == b

    @pytest.mark.parametrize(
        "flight,loyalty",
        [
            ("BN1985,ATL,LAX,OnTime", "Gold,1,2"),
            ("BN1985,ATL,LAX,OnTime,soon", "Gold,1,2"),
            ("BN1985,ATL,LAX,OnTime,-5", "Gold,1,2"),
            ("BN1985,ATL,LAX,OnTime,30", "Unobtainium,1,2"),
            ("BN1985,ATL,LAX,OnTime,30", "Gold,many,2"),
            ("", "Gold,1,2"),
        ],
    )
    def test_malformed_payload_raises(self, flight: str, loyalty: str) -> None:
        with pytest.raises(ParseError):
            FlightStatus.parse("Madrigal", flight, loyalty)


class TestBoardingState:
    """Tests for derive_boarding_state."""

    @pytest.mark.parametrize(
        "minutes,tier,expected",
        [
            (90, LoyaltyTier.GOLD, BoardingState.BOARDING_NOT_STARTED),
            (61, LoyaltyTier.DIAMOND, BoardingState.BOARDING_NOT_STARTED),
            (60, LoyaltyTier.GOLD, BoardingState.WAITING_TO_BOARD),
            (31, LoyaltyTier.GOLD, BoardingState.WAITING_TO_BOARD),
            (30, LoyaltyTier.GOLD, BoardingState.BOARDING),
            (45, LoyaltyTier.DIAMOND, BoardingState.BOARDING),
            (15, LoyaltyTier.BRONZE, BoardingState.BOARDING),
            (14, LoyaltyTier.BRONZE, BoardingState.BOARDING_ENDED),
            (-1, LoyaltyTier.BRONZE, BoardingState.BOARDING_ENDED),
        ],
    )
    def test_derivation(self, minutes: int, tier: LoyaltyTier, expected: BoardingState) -> None:
        assert derive_boarding_state("OnTime", minutes, tier) is expected

    def test_canceled_wins(self) -> None:
        assert derive_boarding_state("Canceled", 5, LoyaltyTier.GOLD) is BoardingState.FLIGHT_CANCELED


class TestTick:
    """Tests for FlightStatus.tick."""

    def test_tick_decrements_and_copies(self) -> None:
        f = _flight(minutes=2)
        nxt = f.tick()
        assert nxt.departure_time_in_minutes == 1
        assert f.departure_time_in_minutes == 2
        assert nxt is not f

    def test_tick_keeps_state_without_tier(self) -> None:
        assert _flight(minutes=2).tick().boarding_status is BoardingState.BOARDING

    def test_tick_rederives_parsed_flight(self) -> None:
        f = FlightStatus.parse("Madrigal", "BN1985,ATL,LAX,OnTime,15", "Gold,1,2")
        assert f.boarding_status is BoardingState.BOARDING
        assert f.tick().boarding_status is BoardingState.BOARDING_ENDED

    def test_canceled_stays_canceled(self) -> None:
        f = FlightStatus.parse("Madrigal", "BN1985,ATL,LAX,Canceled,40", "Gold,1,2")
        for _ in range(5):
            f = f.tick()
            assert f.is_flight_canceled

    def test_minutes_never_below_minus_one(self) -> None:
        f = _flight(minutes=0).tick()
        assert f.departure_time_in_minutes == -1
        with pytest.raises(ValueError):
            f.tick()

    def test_frozen(self) -> None:
        f = _flight()
        with pytest.raises(AttributeError):
            f.departure_time_in_minutes = 10


class TestFlightBoard:
    """Tests for FlightBoard."""

    def test_describe(self) -> None:
        board = FlightBoard(flights=[_flight(passenger_name="Madrigal"), _flight(passenger_name="Estragon", flight_number="BN7")])
        assert board.describe() == "Madrigal (BN1985), Estragon (BN7)"

    def test_to_dataframe_empty(self) -> None:
        df = FlightBoard().to_dataframe()
        assert len(df) == 0
        assert "passenger_name" in df.columns

    def test_to_dataframe_with_flights(self) -> None:
        f = FlightStatus.parse("Madrigal", "BN1985,ATL,LAX,OnTime,40", "Gold,1,2")
        df = FlightBoard(flights=[f]).to_dataframe()
        assert len(df) == 1
        row = df.iloc[0]
        assert row["flight_number"] == "BN1985"
        assert row["boarding_status"] == "WaitingToBoard"
        assert row["loyalty_tier"] == "Gold"
