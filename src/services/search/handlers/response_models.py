from __future__ import annotations

from pydantic import BaseModel

from services.search.domain import ExternalFlight, UnifiedFlight


class UnifiedFlightData(BaseModel):
    """統合検索結果のレスポンスモデル"""

    source: str
    bookable: bool
    internal_flight_id: str | None
    id: str
    flight_number: str | None
    airline_name: str | None
    departure_airport_code: str | None
    arrival_airport_code: str | None
    departure_airport_name: str | None
    arrival_airport_name: str | None
    base_price: str | None
    departure_time: str | None
    arrival_time: str | None
    total_seats: int | None
    available_seats: int | None


class ExternalFlightData(BaseModel):
    """外部フライトのレスポンスモデル"""

    id: str
    flight_number: str | None
    airline: str | None
    origin: str | None
    destination: str | None
    price: str | None
    departure_time: str | None
    arrival_time: str | None


def _str_or_none(value: object) -> str | None:
    return None if value is None else str(value)


def to_unified_flight_data(flight: UnifiedFlight) -> UnifiedFlightData:
    return UnifiedFlightData(
        source=flight.source.value,
        bookable=flight.bookable,
        internal_flight_id=flight.internal_flight_id,
        id=flight.id,
        flight_number=flight.flight_number,
        airline_name=flight.airline_name,
        departure_airport_code=flight.departure_airport_code,
        arrival_airport_code=flight.arrival_airport_code,
        departure_airport_name=flight.departure_airport_name,
        arrival_airport_name=flight.arrival_airport_name,
        base_price=_str_or_none(flight.base_price),
        departure_time=_str_or_none(flight.departure_time),
        arrival_time=_str_or_none(flight.arrival_time),
        total_seats=flight.total_seats,
        available_seats=flight.available_seats,
    )


def to_external_flight_data(flight: ExternalFlight) -> ExternalFlightData:
    return ExternalFlightData(
        id=flight.id,
        flight_number=flight.flight_number,
        airline=flight.airline,
        origin=flight.origin,
        destination=flight.destination,
        price=_str_or_none(flight.price),
        departure_time=_str_or_none(flight.departure_time),
        arrival_time=_str_or_none(flight.arrival_time),
    )
