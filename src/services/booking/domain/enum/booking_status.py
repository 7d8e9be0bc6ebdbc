from __future__ import annotations

from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    PENDING → CONFIRMED | CANCELLED
    CONFIRMED → COMPLETED | CANCELLED
    CANCELLED, COMPLETED, REFUNDED は終端
    """

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"
    REFUNDED = "REFUNDED"

    def can_transition_to(self, target: BookingStatus) -> bool:
        return target in _TRANSITIONS[self]

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]

    @property
    def is_active(self) -> bool:
        """座席を確保している状態か"""
        return self in (BookingStatus.PENDING, BookingStatus.CONFIRMED)


_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset(
        {BookingStatus.CONFIRMED, BookingStatus.CANCELLED}
    ),
    BookingStatus.CONFIRMED: frozenset(
        {BookingStatus.COMPLETED, BookingStatus.CANCELLED}
    ),
    BookingStatus.CANCELLED: frozenset(),
    BookingStatus.COMPLETED: frozenset(),
    BookingStatus.REFUNDED: frozenset(),
}
