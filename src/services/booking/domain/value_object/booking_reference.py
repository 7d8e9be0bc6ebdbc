from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class BookingReference:
    """予約番号

    "BK" + ランダムな UUID の先頭8桁（大文字16進）。
    例: BK1A2B3C4D
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^BK[0-9A-F]{8}$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid booking reference: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingReference:
        return cls(value="BK" + uuid.uuid4().hex[:8].upper())
