from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from services.payment.domain.enum import PaymentMethod


class ProcessPaymentRequest(BaseModel):
    """決済処理リクエストモデル"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    booking_id: str = Field(..., min_length=1)
    payment_method: PaymentMethod = Field(
        ...,
        description="CREDIT_CARD / DEBIT_CARD / NET_BANKING / UPI / WALLET",
        examples=["credit_card"],
    )
