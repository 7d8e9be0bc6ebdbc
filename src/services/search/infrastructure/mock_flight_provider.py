from datetime import date, timedelta
from decimal import Decimal

from services.search.domain import ExternalFlight, ExternalFlightProvider
from services.shared.domain import IsoDateTime

# (id, 便名, 航空会社, 出発地, 到着地, 料金, 出発(基準からの時間), 到着(基準からの時間))
_MOCK_FLIGHTS = (
    ("1", "AA101", "American Airlines", "JFK", "LAX", "299.99", 0, 5),
    ("2", "DL205", "Delta Airlines", "ATL", "SFO", "349.99", 2, 7),
    ("3", "UA310", "United Airlines", "ORD", "MIA", "249.99", 1, 3),
    ("4", "SW450", "Southwest Airlines", "DEN", "SEA", "199.99", 3, 5),
    ("5", "BA501", "British Airways", "LHR", "JFK", "599.99", 4, 10),
    ("6", "LH601", "Lufthansa", "FRA", "DXB", "449.99", 5, 12),
    ("7", "EK701", "Emirates", "DXB", "SIN", "399.99", 6, 14),
    ("8", "QF801", "Qantas", "SYD", "LAX", "699.99", 7, 22),
)


class MockFlightProvider(ExternalFlightProvider):
    """固定の8便を返すプロバイダ（当日 10:00 基準）

    API キー未設定時や Aviationstack が利用できない場合に使用する。
    """

    def __init__(self, today: date | None = None) -> None:
        self._today = today

    def fetch_all(self) -> list[ExternalFlight]:
        base = IsoDateTime.at(self._today or date.today(), 10)
        flights = []
        for row in _MOCK_FLIGHTS:
            flight_id, number, airline, origin, destination, price, dep, arr = row
            flights.append(
                ExternalFlight(
                    id=flight_id,
                    flight_number=number,
                    airline=airline,
                    origin=origin,
                    destination=destination,
                    price=Decimal(price),
                    departure_time=base.plus(timedelta(hours=dep)),
                    arrival_time=base.plus(timedelta(hours=arr)),
                )
            )
        return flights

    def fetch_by_number(self, flight_number: str) -> list[ExternalFlight]:
        return [
            f
            for f in self.fetch_all()
            if f.flight_number and f.flight_number.upper() == flight_number.upper()
        ]

    def fetch_by_route(self, origin: str, destination: str) -> list[ExternalFlight]:
        return [
            f
            for f in self.fetch_all()
            if (f.origin or "").upper() == origin.upper()
            and (f.destination or "").upper() == destination.upper()
        ]

    def fetch_by_id(self, external_id: str) -> ExternalFlight | None:
        """便名で一致する便、なければ id で一致する便"""
        by_number = self.fetch_by_number(external_id)
        if by_number:
            return by_number[0]
        return next((f for f in self.fetch_all() if f.id == external_id), None)
