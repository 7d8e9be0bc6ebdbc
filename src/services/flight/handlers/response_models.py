from __future__ import annotations

from pydantic import BaseModel

from services.flight.domain.entity import Airport, Flight, Seat


class AirportData(BaseModel):
    """空港データのレスポンスモデル"""

    code: str
    name: str
    city: str
    country: str


class FlightData(BaseModel):
    """フライトデータのレスポンスモデル"""

    id: str
    flight_number: str
    airline_name: str
    departure_airport_code: str
    arrival_airport_code: str
    departure_time: str
    arrival_time: str
    total_seats: int
    available_seats: int
    base_price: str
    currency: str
    status: str


class SeatData(BaseModel):
    """座席データのレスポンスモデル"""

    id: str
    flight_id: str
    seat_number: str
    seat_class: str
    price: str
    status: str


def to_airport_data(airport: Airport) -> AirportData:
    return AirportData(
        code=str(airport.code),
        name=airport.name,
        city=airport.city,
        country=airport.country,
    )


def to_flight_data(flight: Flight) -> FlightData:
    return FlightData(
        id=str(flight.id),
        flight_number=str(flight.flight_number),
        airline_name=flight.airline_name,
        departure_airport_code=str(flight.departure_airport),
        arrival_airport_code=str(flight.arrival_airport),
        departure_time=str(flight.departure_time),
        arrival_time=str(flight.arrival_time),
        total_seats=flight.total_seats,
        available_seats=flight.available_seats,
        base_price=str(flight.base_price.amount),
        currency=str(flight.base_price.currency),
        status=flight.status.value,
    )


def to_seat_data(seat: Seat) -> SeatData:
    return SeatData(
        id=str(seat.id),
        flight_id=str(seat.id.flight_id),
        seat_number=str(seat.seat_number),
        seat_class=seat.seat_class.value,
        price=str(seat.price.amount),
        status=seat.status.value,
    )
