import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class PassportNumber:
    """旅券番号（英数字、大文字に正規化）"""

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z0-9]{5,20}$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid passport number: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
