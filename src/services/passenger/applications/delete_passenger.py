from aws_lambda_powertools import Logger

from services.booking.domain.repository import BookingRepository
from services.passenger.domain.repository import PassengerRepository
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import (
    InvalidBookingException,
    ResourceNotFoundException,
    UnitOfWork,
)

logger = Logger(child=True)


class DeletePassengerService:
    """乗客削除ユースケース（座席を確保している予約が残っていれば不可）"""

    def __init__(
        self,
        uow: UnitOfWork,
        passenger_repository: PassengerRepository,
        booking_repository: BookingRepository,
    ) -> None:
        self._uow = uow
        self._passenger_repository = passenger_repository
        self._booking_repository = booking_repository

    def delete(self, passenger_id: str) -> None:
        with self._uow:
            passenger = self._passenger_repository.find_by_id(PassengerId(passenger_id))
            if passenger is None:
                raise ResourceNotFoundException.of("Passenger", passenger_id)

            bookings = self._booking_repository.find_by_passenger_id(passenger.id)
            if any(b.status.is_active for b in bookings):
                raise InvalidBookingException(
                    "Cannot delete passenger with active bookings"
                )

            self._passenger_repository.delete(passenger)
            self._uow.commit()

        logger.info("Passenger deleted", extra={"passenger_id": passenger_id})
