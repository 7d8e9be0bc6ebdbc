from services.booking.domain.value_object import BookingId, BookingReference
from services.payment.domain.enum import PaymentMethod, PaymentStatus
from services.payment.domain.value_object import PaymentId, TransactionId
from services.shared.domain import AggregateRoot, IsoDateTime, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Payment(AggregateRoot[PaymentId]):
    """決済エンティティ"""

    def __init__(
        self,
        id: PaymentId,
        booking_id: BookingId,
        booking_reference: BookingReference,
        transaction_id: TransactionId,
        amount: Money,
        method: PaymentMethod,
        payment_date: IsoDateTime,
        status: PaymentStatus = PaymentStatus.PENDING,
    ) -> None:
        super().__init__(id)
        self._booking_id = booking_id
        self._booking_reference = booking_reference
        self._transaction_id = transaction_id
        self._amount = amount
        self._method = method
        self._payment_date = payment_date
        self._status = status

    @property
    def booking_id(self) -> BookingId:
        return self._booking_id

    @property
    def booking_reference(self) -> BookingReference:
        return self._booking_reference

    @property
    def transaction_id(self) -> TransactionId:
        return self._transaction_id

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def method(self) -> PaymentMethod:
        return self._method

    @property
    def payment_date(self) -> IsoDateTime:
        return self._payment_date

    @property
    def status(self) -> PaymentStatus:
        return self._status

    def succeed(self) -> None:
        """ゲートウェイが決済を承認した"""
        self._settle(PaymentStatus.SUCCESS)

    def fail(self) -> None:
        """ゲートウェイが決済を拒否した"""
        self._settle(PaymentStatus.FAILED)

    def _settle(self, result: PaymentStatus) -> None:
        if self._status != PaymentStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot settle payment in {self._status.value} status"
            )
        self._status = result
