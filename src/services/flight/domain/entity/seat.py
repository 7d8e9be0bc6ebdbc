from services.flight.domain.enum import SeatClass, SeatStatus
from services.flight.domain.value_object import SeatId, SeatNumber
from services.shared.domain import Entity, Money


class Seat(Entity[SeatId]):
    """座席

    Flight 集約の内部エンティティ。ステータスの変更は Flight を経由して行う。
    """

    def __init__(
        self,
        id: SeatId,
        seat_class: SeatClass,
        price: Money,
        status: SeatStatus = SeatStatus.AVAILABLE,
    ) -> None:
        super().__init__(id)
        self._seat_class = seat_class
        self._price = price
        self._status = status

    @property
    def seat_number(self) -> SeatNumber:
        return self.id.seat_number

    @property
    def seat_class(self) -> SeatClass:
        return self._seat_class

    @property
    def price(self) -> Money:
        return self._price

    @property
    def status(self) -> SeatStatus:
        return self._status

    @property
    def is_available(self) -> bool:
        return self._status == SeatStatus.AVAILABLE

    def _change_status(self, status: SeatStatus) -> SeatStatus:
        previous = self._status
        self._status = status
        return previous
