from dataclasses import dataclass

from services.flight.domain.enum import FlightStatus, SeatStatus
from services.flight.domain.value_object import SeatNumber


@dataclass(frozen=True)
class SeatStatusChanged:
    """座席ステータスが遷移した"""

    seat_number: SeatNumber
    previous: SeatStatus
    current: SeatStatus


@dataclass(frozen=True)
class FlightStatusChanged:
    """運航ステータスが遷移した"""

    previous: FlightStatus
    current: FlightStatus
