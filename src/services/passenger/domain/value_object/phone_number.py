import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class PhoneNumber:
    """電話番号（数字10桁）"""

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^\d{10}$")

    def __post_init__(self) -> None:
        if not self.PATTERN.match(self.value):
            raise ValueError("Phone number must be 10 digits")

    def __str__(self) -> str:
        return self.value
