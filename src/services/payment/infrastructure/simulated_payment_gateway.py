import os
import random
from collections.abc import Callable

from aws_lambda_powertools import Logger

from services.payment.domain.entity import Payment
from services.payment.domain.gateway import PaymentGateway

logger = Logger(child=True)

DEFAULT_SUCCESS_RATE = 0.95


class SimulatedPaymentGateway(PaymentGateway):
    """外部決済サービスを模したゲートウェイ

    成功率は PAYMENT_SUCCESS_RATE（既定 0.95）で設定する。
    """

    def __init__(
        self,
        success_rate: float | None = None,
        rng: Callable[[], float] = random.random,
    ) -> None:
        if success_rate is None:
            success_rate = float(
                os.getenv("PAYMENT_SUCCESS_RATE", str(DEFAULT_SUCCESS_RATE))
            )
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError("Payment success rate must be between 0 and 1")
        self._success_rate = success_rate
        self._rng = rng

    def charge(self, payment: Payment) -> bool:
        approved = self._rng() < self._success_rate
        logger.info(
            "Payment gateway responded",
            extra={
                "transaction_id": str(payment.transaction_id),
                "approved": approved,
            },
        )
        return approved
