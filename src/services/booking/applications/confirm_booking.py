from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.flight.applications.seat_allocation import SeatAllocationService
from services.shared.domain import ResourceNotFoundException, UnitOfWork

logger = Logger(child=True)


class ConfirmBookingService:
    """予約確定ユースケース（座席を OCCUPIED にする）"""

    def __init__(
        self,
        uow: UnitOfWork,
        booking_repository: BookingRepository,
        seat_allocation: SeatAllocationService,
    ) -> None:
        self._uow = uow
        self._booking_repository = booking_repository
        self._seat_allocation = seat_allocation

    def confirm(self, booking_id: str) -> Booking:
        with self._uow:
            booking = self._booking_repository.find_by_id(BookingId(booking_id))
            if booking is None:
                raise ResourceNotFoundException.of("Booking", booking_id)

            booking.confirm()
            self._seat_allocation.occupy(booking.seat_id)
            self._booking_repository.update(
                booking, expected_status=BookingStatus.PENDING
            )
            self._uow.commit()

        logger.info("Booking confirmed", extra={"booking_id": booking_id})
        return booking
