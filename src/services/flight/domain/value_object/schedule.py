from dataclasses import dataclass

from services.shared.domain import InvalidBookingException, IsoDateTime


@dataclass(frozen=True)
class Schedule:
    """運航スケジュール（出発時刻 < 到着時刻）"""

    departure_time: IsoDateTime
    arrival_time: IsoDateTime

    def __post_init__(self) -> None:
        if not self.arrival_time.is_after(self.departure_time):
            raise InvalidBookingException("Arrival time must be after departure time")
