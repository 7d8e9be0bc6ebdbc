from enum import Enum


class PaymentStatus(str, Enum):
    """決済ステータス"""

    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"
