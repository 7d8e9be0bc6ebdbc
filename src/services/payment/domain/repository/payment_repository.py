from abc import abstractmethod

from services.booking.domain.value_object import BookingId
from services.payment.domain.entity import Payment
from services.payment.domain.value_object import PaymentId, TransactionId
from services.shared.domain import Repository


class PaymentRepository(Repository[Payment, PaymentId]):
    """決済リポジトリのインターフェース"""

    @abstractmethod
    def save(self, payment: Payment) -> None:
        """決済の新規作成をステージする（予約ごとに1件）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        """決済IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_booking_id(self, booking_id: BookingId) -> Payment | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_transaction_id(self, transaction_id: TransactionId) -> Payment | None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Payment]:
        raise NotImplementedError
