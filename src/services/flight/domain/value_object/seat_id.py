from __future__ import annotations

from dataclasses import dataclass

from .flight_id import FlightId
from .seat_number import SeatNumber


@dataclass(frozen=True)
class SeatId:
    """座席ID

    座席はフライトの中で座席番号により一意となるため、
    フライトIDと座席番号の組をIDとする。
    例: "0b6c...:12A"
    """

    flight_id: FlightId
    seat_number: SeatNumber

    SEPARATOR = ":"

    def __str__(self) -> str:
        return f"{self.flight_id}{self.SEPARATOR}{self.seat_number}"

    @classmethod
    def from_string(cls, s: str) -> SeatId:
        """文字列表現から生成する"""
        flight_id, sep, seat_number = s.rpartition(cls.SEPARATOR)
        if not sep or not flight_id:
            raise ValueError(f"Invalid seat ID: {s}")
        return cls(
            flight_id=FlightId(value=flight_id),
            seat_number=SeatNumber(value=seat_number),
        )
