from __future__ import annotations

from enum import Enum


class PaymentMethod(str, Enum):
    """支払い方法（入力は大文字・小文字を区別しない）"""

    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    NET_BANKING = "NET_BANKING"
    UPI = "UPI"
    WALLET = "WALLET"

    @classmethod
    def _missing_(cls, value: object) -> PaymentMethod | None:
        if isinstance(value, str):
            normalized = value.strip().upper()
            for member in cls:
                if member.value == normalized:
                    return member
        return None
