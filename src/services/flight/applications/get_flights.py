from datetime import date, timedelta

from services.flight.domain.entity import Flight, Seat
from services.flight.domain.enum import FlightStatus
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import (
    AirportCode,
    FlightId,
    FlightNumber,
    SeatId,
)
from services.shared.domain import IsoDateTime, ResourceNotFoundException


class FlightQueryService:
    """フライト・座席の参照ユースケース"""

    def __init__(self, repository: FlightRepository) -> None:
        self._repository = repository

    def get(self, flight_id: str) -> Flight:
        flight = self._repository.find_by_id(FlightId(flight_id))
        if flight is None:
            raise ResourceNotFoundException.of("Flight", flight_id)
        return flight

    def get_by_number(self, flight_number: str) -> Flight:
        number = FlightNumber(flight_number)
        flight = self._repository.find_by_flight_number(number)
        if flight is None:
            raise ResourceNotFoundException.of("Flight", number, "flightNumber")
        return flight

    def list_all(self, status: FlightStatus | None = None) -> list[Flight]:
        return self._repository.find_all(status=status)

    def search(
        self, departure_code: str, arrival_code: str, departure_date: date
    ) -> list[Flight]:
        """指定日 [00:00, 翌日 00:00) に出発する予約可能なフライトを検索する"""
        start = IsoDateTime.at(departure_date, 0)
        end = start.plus(timedelta(days=1))
        flights = self._repository.search(
            AirportCode(departure_code), AirportCode(arrival_code), start, end
        )
        return [
            f
            for f in flights
            if f.is_bookable()
            and not f.departure_time.is_before(start)
            and f.departure_time.is_before(end)
        ]

    def list_seats(self, flight_id: str, available_only: bool = False) -> list[Seat]:
        flight = self.get(flight_id)
        return flight.available_seat_list() if available_only else flight.seats

    def get_seat(self, seat_id: str) -> Seat:
        sid = SeatId.from_string(seat_id)
        flight = self._repository.find_by_id(sid.flight_id)
        seat = flight.seat(sid.seat_number) if flight else None
        if seat is None:
            raise ResourceNotFoundException.of("Seat", sid)
        return seat
