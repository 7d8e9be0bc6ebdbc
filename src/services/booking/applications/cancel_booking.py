from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.flight.applications.seat_allocation import SeatAllocationService
from services.shared.domain import ResourceNotFoundException, UnitOfWork

logger = Logger(child=True)


class CancelBookingService:
    """予約キャンセルユースケース（座席を解放し空席数を戻す）"""

    def __init__(
        self,
        uow: UnitOfWork,
        booking_repository: BookingRepository,
        seat_allocation: SeatAllocationService,
    ) -> None:
        self._uow = uow
        self._booking_repository = booking_repository
        self._seat_allocation = seat_allocation

    def cancel(self, booking_id: str) -> Booking:
        with self._uow:
            booking = self._booking_repository.find_by_id(BookingId(booking_id))
            if booking is None:
                raise ResourceNotFoundException.of("Booking", booking_id)

            expected_status = booking.status
            booking.cancel()
            self._seat_allocation.release(booking.seat_id, booking.flight_id)
            self._booking_repository.update(booking, expected_status=expected_status)
            self._uow.commit()

        logger.info(
            "Booking cancelled",
            extra={"booking_id": booking_id, "previous": expected_status.value},
        )
        return booking
