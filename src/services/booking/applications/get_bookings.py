from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId, BookingReference
from services.passenger.domain.repository import PassengerRepository
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import ResourceNotFoundException


class BookingQueryService:
    """予約の参照ユースケース"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        passenger_repository: PassengerRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._passenger_repository = passenger_repository

    def get(self, booking_id: str) -> Booking:
        booking = self._booking_repository.find_by_id(BookingId(booking_id))
        if booking is None:
            raise ResourceNotFoundException.of("Booking", booking_id)
        return booking

    def get_by_reference(self, reference: str) -> Booking:
        try:
            ref = BookingReference(reference)
        except ValueError as e:
            # 形式が不正な参照番号は存在しない参照番号として扱う
            raise ResourceNotFoundException.of(
                "Booking", reference, "bookingReference"
            ) from e
        booking = self._booking_repository.find_by_reference(ref)
        if booking is None:
            raise ResourceNotFoundException.of("Booking", ref, "bookingReference")
        return booking

    def list_by_passenger(self, passenger_id: str) -> list[Booking]:
        pid = PassengerId(passenger_id)
        if self._passenger_repository.find_by_id(pid) is None:
            raise ResourceNotFoundException.of("Passenger", passenger_id)
        return self._booking_repository.find_by_passenger_id(pid)

    def list_all(self, status: BookingStatus | None = None) -> list[Booking]:
        return self._booking_repository.find_all(status=status)
