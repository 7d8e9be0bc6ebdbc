from abc import abstractmethod

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId, BookingReference
from services.flight.domain.value_object import FlightId
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """予約レポジトリ"""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """新規作成をステージする"""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking, expected_status: BookingStatus) -> None:
        """ステータス更新をステージする（現在のステータスが expected_status であること）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_reference(self, reference: BookingReference) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_passenger_id(self, passenger_id: PassengerId) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def find_by_flight_id(self, flight_id: FlightId) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def find_all(self, status: BookingStatus | None = None) -> list[Booking]:
        raise NotImplementedError
