from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId, BookingReference
from services.flight.domain.value_object import FlightId, SeatId
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import (
    AggregateRoot,
    InvalidBookingException,
    IsoDateTime,
    Money,
)


class Booking(AggregateRoot[BookingId]):
    """座席予約

    座席（seat_id）は作成後に変更されない。
    """

    def __init__(
        self,
        id: BookingId,
        reference: BookingReference,
        passenger_id: PassengerId,
        flight_id: FlightId,
        seat_id: SeatId,
        total_price: Money,
        created_at: IsoDateTime,
        status: BookingStatus = BookingStatus.PENDING,
    ) -> None:
        super().__init__(id)

        if seat_id.flight_id != flight_id:
            raise InvalidBookingException(
                "Selected seat does not belong to the chosen flight"
            )

        self._reference = reference
        self._passenger_id = passenger_id
        self._flight_id = flight_id
        self._seat_id = seat_id
        self._total_price = total_price
        self._created_at = created_at
        self._status = status

    @property
    def reference(self) -> BookingReference:
        return self._reference

    @property
    def passenger_id(self) -> PassengerId:
        return self._passenger_id

    @property
    def flight_id(self) -> FlightId:
        return self._flight_id

    @property
    def seat_id(self) -> SeatId:
        return self._seat_id

    @property
    def total_price(self) -> Money:
        return self._total_price

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def status(self) -> BookingStatus:
        return self._status

    def confirm(self) -> None:
        """予約を確定する（PENDING のみ）"""
        if self._status != BookingStatus.PENDING:
            raise InvalidBookingException("Only pending bookings can be confirmed")
        self._transition(BookingStatus.CONFIRMED)

    def cancel(self) -> None:
        """予約をキャンセルする（冪等ではない）"""
        if self._status == BookingStatus.CANCELLED:
            raise InvalidBookingException("Booking is already cancelled")
        if self._status == BookingStatus.COMPLETED:
            raise InvalidBookingException("Cannot cancel completed booking")
        self._transition(BookingStatus.CANCELLED)

    def complete(self) -> None:
        """搭乗完了にする（CONFIRMED のみ）"""
        self._transition(BookingStatus.COMPLETED)

    def _transition(self, target: BookingStatus) -> None:
        if not self._status.can_transition_to(target):
            raise InvalidBookingException(
                f"Cannot change booking status from {self._status.value} "
                f"to {target.value}"
            )
        self._status = target
