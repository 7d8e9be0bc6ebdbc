from abc import ABC, abstractmethod

from services.payment.domain.entity import Payment


class PaymentGateway(ABC):
    """決済ゲートウェイ

    承認されれば True、拒否されれば False を返す。
    """

    @abstractmethod
    def charge(self, payment: Payment) -> bool:
        raise NotImplementedError
