from services.booking.domain.entity import Booking
from services.payment.domain.entity import Payment
from services.payment.domain.enum import PaymentMethod, PaymentStatus
from services.payment.domain.value_object import PaymentId, TransactionId
from services.shared.domain import IsoDateTime


class PaymentFactory:
    """決済ファクトリ"""

    def create(self, booking: Booking, method: PaymentMethod) -> Payment:
        """予約の合計金額で新規決済（PENDING）を生成する"""
        return Payment(
            id=PaymentId.from_booking_id(booking.id),
            booking_id=booking.id,
            booking_reference=booking.reference,
            transaction_id=TransactionId.generate(),
            amount=booking.total_price,
            method=method,
            payment_date=IsoDateTime.now(),
            status=PaymentStatus.PENDING,
        )
