from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId, BookingReference
from services.flight.domain.entity import Flight, Seat
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import IsoDateTime


class BookingFactory:
    """予約エンティティのファクトリ

    - ID・予約番号の生成
    - 合計金額 = フライトの基本運賃 + 座席料金
    - 初期状態の設定（PENDING）
    """

    def create(self, passenger_id: PassengerId, flight: Flight, seat: Seat) -> Booking:
        return Booking(
            id=BookingId.generate(),
            reference=BookingReference.generate(),
            passenger_id=passenger_id,
            flight_id=flight.id,
            seat_id=seat.id,
            total_price=flight.base_price.add(seat.price),
            created_at=IsoDateTime.now(),
            status=BookingStatus.PENDING,
        )
