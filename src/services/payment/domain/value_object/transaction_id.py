from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class TransactionId:
    """決済トランザクションID（"TXN" + 大文字16進12桁）"""

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^TXN[0-9A-F]{12}$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid transaction ID: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> TransactionId:
        return cls(value="TXN" + uuid.uuid4().hex[:12].upper())
