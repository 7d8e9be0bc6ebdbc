from __future__ import annotations

from collections.abc import Iterable

from services.flight.domain.entity.seat import Seat
from services.flight.domain.enum import FlightStatus, SeatStatus
from services.flight.domain.event import FlightStatusChanged, SeatStatusChanged
from services.flight.domain.value_object import (
    AirportCode,
    FlightId,
    FlightNumber,
    Schedule,
    SeatId,
    SeatNumber,
)
from services.shared.domain import (
    AggregateRoot,
    BusinessRuleViolationException,
    InvalidBookingException,
    IsoDateTime,
    Money,
    ResourceNotFoundException,
    SeatUnavailableException,
)


class Flight(AggregateRoot[FlightId]):
    """フライト

    座席（Seat）を内包する集約。座席ステータスと空席数（available_seats）は
    常にこの集約を通して同時に変更され、変更はドメインイベントとして記録される。
    """

    def __init__(
        self,
        id: FlightId,
        flight_number: FlightNumber,
        airline_name: str,
        departure_airport: AirportCode,
        arrival_airport: AirportCode,
        schedule: Schedule,
        total_seats: int,
        available_seats: int,
        base_price: Money,
        status: FlightStatus = FlightStatus.SCHEDULED,
        seats: Iterable[Seat] = (),
    ) -> None:
        super().__init__(id)

        self._flight_number = flight_number
        self._airline_name = airline_name
        self._departure_airport = departure_airport
        self._arrival_airport = arrival_airport
        self._schedule = schedule
        self._total_seats = total_seats
        self._available_seats = available_seats
        self._base_price = base_price
        self._status = status
        self._seats: dict[SeatNumber, Seat] = {
            seat.seat_number: seat for seat in seats
        }

        self._validate()

    def _validate(self) -> None:
        if not self._airline_name or not self._airline_name.strip():
            raise ValueError("Airline name is required")
        if self._departure_airport == self._arrival_airport:
            raise InvalidBookingException(
                "Departure and arrival airports cannot be the same"
            )
        if self._total_seats <= 0:
            raise ValueError("Total seats must be positive")
        if not 0 <= self._available_seats <= self._total_seats:
            raise BusinessRuleViolationException(
                "Available seats must be between 0 and total seats"
            )
        for seat in self._seats.values():
            if seat.id.flight_id != self.id:
                raise BusinessRuleViolationException(
                    f"Seat {seat.id} does not belong to flight {self.id}"
                )

    @property
    def flight_number(self) -> FlightNumber:
        return self._flight_number

    @property
    def airline_name(self) -> str:
        return self._airline_name

    @property
    def departure_airport(self) -> AirportCode:
        return self._departure_airport

    @property
    def arrival_airport(self) -> AirportCode:
        return self._arrival_airport

    @property
    def schedule(self) -> Schedule:
        return self._schedule

    @property
    def departure_time(self) -> IsoDateTime:
        return self._schedule.departure_time

    @property
    def arrival_time(self) -> IsoDateTime:
        return self._schedule.arrival_time

    @property
    def total_seats(self) -> int:
        return self._total_seats

    @property
    def available_seats(self) -> int:
        return self._available_seats

    @property
    def base_price(self) -> Money:
        return self._base_price

    @property
    def status(self) -> FlightStatus:
        return self._status

    @property
    def seats(self) -> list[Seat]:
        """座席表の並び順で返す"""
        return sorted(self._seats.values(), key=lambda s: s.seat_number.sort_key)

    def available_seat_list(self) -> list[Seat]:
        return [seat for seat in self.seats if seat.is_available]

    def seat(self, seat_number: SeatNumber) -> Seat | None:
        return self._seats.get(seat_number)

    def is_bookable(self) -> bool:
        """予約を受け付けられる状態か"""
        return self._status == FlightStatus.SCHEDULED and self._available_seats > 0

    def reserve_seat(self, seat_number: SeatNumber) -> Seat:
        """座席を仮押さえする（AVAILABLE → RESERVED、空席数 -1）

        空席数のチェックは座席ステータスのチェックより先に行う。
        """
        seat = self._get_seat(seat_number)

        if self._available_seats <= 0:
            raise InvalidBookingException("No seats available on this flight")
        if self._status != FlightStatus.SCHEDULED:
            raise InvalidBookingException(
                f"Flight is not available for booking. Status: {self._status.value}"
            )
        if seat.status != SeatStatus.AVAILABLE:
            raise SeatUnavailableException(seat_number)

        self._transition(seat, SeatStatus.RESERVED)
        self._available_seats -= 1
        return seat

    def occupy_seat(self, seat_number: SeatNumber) -> Seat:
        """仮押さえ中の座席を確定する（RESERVED → OCCUPIED、空席数は変わらない）"""
        seat = self._get_seat(seat_number)
        if seat.status != SeatStatus.RESERVED:
            raise InvalidBookingException(
                f"Seat {seat_number} is not reserved. Status: {seat.status.value}"
            )

        self._transition(seat, SeatStatus.OCCUPIED)
        return seat

    def release_seat(self, seat_number: SeatNumber) -> Seat:
        """座席を解放する（RESERVED/OCCUPIED → AVAILABLE、空席数 +1）"""
        seat = self._get_seat(seat_number)
        if seat.status not in (SeatStatus.RESERVED, SeatStatus.OCCUPIED):
            raise InvalidBookingException(
                f"Seat {seat_number} cannot be released. Status: {seat.status.value}"
            )

        self._transition(seat, SeatStatus.AVAILABLE)
        self._available_seats += 1
        return seat

    def change_status(self, status: FlightStatus) -> None:
        """運航ステータスを変更する"""
        if status == self._status:
            return
        self.add_domain_event(
            FlightStatusChanged(previous=self._status, current=status)
        )
        self._status = status

    def _get_seat(self, seat_number: SeatNumber) -> Seat:
        seat = self._seats.get(seat_number)
        if seat is None:
            raise ResourceNotFoundException.of("Seat", SeatId(self.id, seat_number))
        return seat

    def _transition(self, seat: Seat, status: SeatStatus) -> None:
        previous = seat._change_status(status)
        self.add_domain_event(
            SeatStatusChanged(
                seat_number=seat.seat_number, previous=previous, current=status
            )
        )
