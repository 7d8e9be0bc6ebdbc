from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.payment.domain.entity import Payment
from services.payment.domain.repository import PaymentRepository
from services.payment.domain.value_object import PaymentId, TransactionId
from services.shared.domain import ResourceNotFoundException


class PaymentQueryService:
    """決済の参照ユースケース"""

    def __init__(
        self,
        payment_repository: PaymentRepository,
        booking_repository: BookingRepository,
    ) -> None:
        self._payment_repository = payment_repository
        self._booking_repository = booking_repository

    def get(self, payment_id: str) -> Payment:
        payment = self._payment_repository.find_by_id(PaymentId(payment_id))
        if payment is None:
            raise ResourceNotFoundException.of("Payment", payment_id)
        return payment

    def get_by_transaction_id(self, transaction_id: str) -> Payment:
        payment = self._payment_repository.find_by_transaction_id(
            TransactionId(transaction_id)
        )
        if payment is None:
            raise ResourceNotFoundException.of(
                "Payment", transaction_id, "transactionId"
            )
        return payment

    def get_by_booking_id(self, booking_id: str) -> Payment:
        """予約の決済を取得する（予約自体が無ければ Booking の NotFound）"""
        bid = BookingId(booking_id)
        if self._booking_repository.find_by_id(bid) is None:
            raise ResourceNotFoundException.of("Booking", booking_id)

        payment = self._payment_repository.find_by_booking_id(bid)
        if payment is None:
            raise ResourceNotFoundException(
                f"Payment not found for booking ID: {booking_id}"
            )
        return payment

    def list_all(self) -> list[Payment]:
        return self._payment_repository.find_all()
