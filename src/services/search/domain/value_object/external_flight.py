from dataclasses import dataclass
from decimal import Decimal

from services.shared.domain import IsoDateTime


@dataclass(frozen=True)
class ExternalFlight:
    """外部プロバイダから取得したフライト（予約不可の参照情報）"""

    id: str
    flight_number: str | None
    airline: str | None
    origin: str | None
    destination: str | None
    price: Decimal | None = None
    departure_time: IsoDateTime | None = None
    arrival_time: IsoDateTime | None = None


DOMESTIC_ESTIMATE = Decimal("299.99")
INTERNATIONAL_ESTIMATE = Decimal("599.99")
UNKNOWN_ROUTE_ESTIMATE = Decimal("399.99")


def estimate_price(origin: str | None, destination: str | None) -> Decimal:
    """料金情報を持たない外部フライトの推定料金

    両端の空港コードが3文字なら国内線とみなす簡易的な判定。
    """
    if origin is not None and destination is not None:
        domestic = len(origin) == 3 and len(destination) == 3
        return DOMESTIC_ESTIMATE if domestic else INTERNATIONAL_ESTIMATE
    return UNKNOWN_ROUTE_ESTIMATE
