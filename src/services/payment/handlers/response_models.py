from __future__ import annotations

from pydantic import BaseModel

from services.payment.domain.entity import Payment


class PaymentData(BaseModel):
    """決済データのレスポンスモデル"""

    id: str
    booking_id: str
    booking_reference: str
    transaction_id: str
    amount: str
    currency: str
    payment_method: str
    status: str
    payment_date: str


def to_payment_data(payment: Payment) -> PaymentData:
    return PaymentData(
        id=str(payment.id),
        booking_id=str(payment.booking_id),
        booking_reference=str(payment.booking_reference),
        transaction_id=str(payment.transaction_id),
        amount=str(payment.amount.amount),
        currency=str(payment.amount.currency),
        payment_method=payment.method.value,
        status=payment.status.value,
        payment_date=str(payment.payment_date),
    )
