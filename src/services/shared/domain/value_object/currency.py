from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    サポート対象: USD, JPY
    """

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"JPY", "USD"})
    MINOR_UNITS: ClassVar[dict[str, Decimal]] = {
        "JPY": Decimal("1"),
        "USD": Decimal("0.01"),
    }

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if normalized not in self.SUPPORTED:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.SUPPORTED))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def minor_unit(self) -> Decimal:
        """最小通貨単位（USD なら 0.01）"""
        return self.MINOR_UNITS[self.code]

    @classmethod
    def jpy(cls) -> Currency:
        """日本円"""
        return cls("JPY")

    @classmethod
    def usd(cls) -> Currency:
        """米ドル"""
        return cls("USD")
