from __future__ import annotations

from pydantic import BaseModel

from services.booking.domain.entity import Booking


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    id: str
    booking_reference: str
    passenger_id: str
    flight_id: str
    seat_id: str
    seat_number: str
    status: str
    total_price: str
    currency: str
    created_at: str


def to_booking_data(booking: Booking) -> BookingData:
    return BookingData(
        id=str(booking.id),
        booking_reference=str(booking.reference),
        passenger_id=str(booking.passenger_id),
        flight_id=str(booking.flight_id),
        seat_id=str(booking.seat_id),
        seat_number=str(booking.seat_id.seat_number),
        status=booking.status.value,
        total_price=str(booking.total_price.amount),
        currency=str(booking.total_price.currency),
        created_at=str(booking.created_at),
    )
