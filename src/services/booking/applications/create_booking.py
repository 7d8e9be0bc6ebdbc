from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingFactory
from services.booking.domain.repository import BookingRepository
from services.flight.applications.seat_allocation import SeatAllocationService
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightId, SeatId
from services.passenger.domain.repository import PassengerRepository
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import (
    OptimisticLockException,
    ResourceNotFoundException,
    SeatUnavailableException,
    UnitOfWork,
)

logger = Logger(child=True)


class CreateBookingService:
    """予約作成ユースケース

    座席の仮押さえ（座席ステータス + 空席数）と予約の作成を1つの UnitOfWork で書き込む。
    同じ座席を取り合った場合、後から commit した側は SeatUnavailableException となる。
    """

    def __init__(
        self,
        uow: UnitOfWork,
        passenger_repository: PassengerRepository,
        flight_repository: FlightRepository,
        booking_repository: BookingRepository,
        seat_allocation: SeatAllocationService,
        factory: BookingFactory,
    ) -> None:
        self._uow = uow
        self._passenger_repository = passenger_repository
        self._flight_repository = flight_repository
        self._booking_repository = booking_repository
        self._seat_allocation = seat_allocation
        self._factory = factory

    def create(self, passenger_id: str, flight_id: str, seat_id: str) -> Booking:
        with self._uow:
            passenger = self._passenger_repository.find_by_id(PassengerId(passenger_id))
            if passenger is None:
                raise ResourceNotFoundException.of("Passenger", passenger_id)

            flight = self._flight_repository.find_by_id(FlightId(flight_id))
            if flight is None:
                raise ResourceNotFoundException.of("Flight", flight_id)

            sid = SeatId.from_string(seat_id)
            seat = self._seat_allocation.reserve(sid, flight)

            booking = self._factory.create(passenger.id, flight, seat)
            self._booking_repository.save(booking)

            try:
                self._uow.commit()
            except OptimisticLockException as e:
                logger.info("Lost seat allocation race", extra={"seat_id": seat_id})
                raise SeatUnavailableException(sid.seat_number) from e

        logger.info(
            "Booking created",
            extra={
                "booking_id": str(booking.id),
                "booking_reference": str(booking.reference),
                "seat_id": seat_id,
            },
        )
        return booking
