from __future__ import annotations

from dataclasses import dataclass

from services.booking.domain.value_object import BookingId


@dataclass(frozen=True)
class PaymentId:
    """決済ID（Value Object）

    予約1件につき決済は1件のみのため、予約IDから決定的に導出する。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Payment ID cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_booking_id(cls, booking_id: BookingId) -> PaymentId:
        """BookingId から冪等な PaymentId を生成"""
        return cls(value=f"{_PREFIX}{booking_id}")

    @property
    def booking_id(self) -> BookingId:
        return BookingId(self.value.removeprefix(_PREFIX))


_PREFIX = "payment_for_"
