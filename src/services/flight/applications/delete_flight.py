from aws_lambda_powertools import Logger

from services.booking.domain.repository import BookingRepository
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightId
from services.shared.domain import (
    InvalidBookingException,
    ResourceNotFoundException,
    UnitOfWork,
)

logger = Logger(child=True)


class DeleteFlightService:
    """フライト削除ユースケース

    座席を確保している予約（PENDING / CONFIRMED）が残っているフライトは削除できない。
    確認後に予約が入った場合は空席数の条件で commit 時に競合となる。
    """

    def __init__(
        self,
        uow: UnitOfWork,
        flight_repository: FlightRepository,
        booking_repository: BookingRepository,
    ) -> None:
        self._uow = uow
        self._flight_repository = flight_repository
        self._booking_repository = booking_repository

    def delete(self, flight_id: str) -> None:
        with self._uow:
            flight = self._flight_repository.find_by_id(FlightId(flight_id))
            if flight is None:
                raise ResourceNotFoundException.of("Flight", flight_id)

            bookings = self._booking_repository.find_by_flight_id(flight.id)
            if any(b.status.is_active for b in bookings):
                raise InvalidBookingException(
                    "Cannot delete flight with active bookings"
                )

            self._flight_repository.delete(flight)
            self._uow.commit()

        logger.info(
            "Flight deleted",
            extra={"flight_id": flight_id, "flight_number": str(flight.flight_number)},
        )
