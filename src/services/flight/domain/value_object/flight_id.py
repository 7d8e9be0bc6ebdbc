from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class FlightId:
    """フライトID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Flight ID cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> FlightId:
        return cls(value=str(uuid.uuid4()))
