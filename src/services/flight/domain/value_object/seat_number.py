from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class SeatNumber:
    """座席番号（列番号 + 座席記号）

    例: 1A, 12F
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^([1-9]\d*)([A-Z])$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid seat number: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def of(cls, row: int, letter: str) -> SeatNumber:
        return cls(value=f"{row}{letter}")

    @property
    def row(self) -> int:
        return int(self.value[:-1])

    @property
    def letter(self) -> str:
        return self.value[-1]

    @property
    def sort_key(self) -> tuple[int, str]:
        """座席表の並び順（列番号 → 座席記号）"""
        return (self.row, self.letter)
