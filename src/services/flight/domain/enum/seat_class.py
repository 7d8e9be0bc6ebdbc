from __future__ import annotations

from decimal import Decimal
from enum import Enum


class SeatClass(str, Enum):
    """座席クラス"""

    FIRST_CLASS = "FIRST_CLASS"
    BUSINESS = "BUSINESS"
    PREMIUM_ECONOMY = "PREMIUM_ECONOMY"
    ECONOMY = "ECONOMY"

    @property
    def price_multiplier(self) -> Decimal:
        """基本運賃に対する倍率"""
        return _PRICE_MULTIPLIERS[self]

    @classmethod
    def for_row(cls, row: int) -> SeatClass:
        """列番号から座席クラスを決定する"""
        if row <= 2:
            return cls.FIRST_CLASS
        if row <= 5:
            return cls.BUSINESS
        if row <= 10:
            return cls.PREMIUM_ECONOMY
        return cls.ECONOMY


_PRICE_MULTIPLIERS = {
    SeatClass.FIRST_CLASS: Decimal("3"),
    SeatClass.BUSINESS: Decimal("2"),
    SeatClass.PREMIUM_ECONOMY: Decimal("1.5"),
    SeatClass.ECONOMY: Decimal("1"),
}
