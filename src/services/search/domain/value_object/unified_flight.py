from dataclasses import dataclass
from decimal import Decimal

from services.search.domain.enum import FlightSource
from services.shared.domain import IsoDateTime


@dataclass(frozen=True)
class UnifiedFlight:
    """統合検索の結果1件

    bookable なのは内部フライトのみ。外部フライトは取り込み後に予約できる。
    """

    source: FlightSource
    bookable: bool
    internal_flight_id: str | None
    id: str
    flight_number: str | None
    airline_name: str | None
    departure_airport_code: str | None
    arrival_airport_code: str | None
    departure_airport_name: str | None
    arrival_airport_name: str | None
    base_price: Decimal | None
    departure_time: IsoDateTime | None
    arrival_time: IsoDateTime | None
    total_seats: int | None = None
    available_seats: int | None = None
