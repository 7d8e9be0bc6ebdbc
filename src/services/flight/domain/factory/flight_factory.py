from decimal import Decimal
from typing import TypedDict

from services.flight.domain.entity import Flight, Seat
from services.flight.domain.enum import FlightStatus, SeatClass, SeatStatus
from services.flight.domain.value_object import (
    AirportCode,
    FlightId,
    FlightNumber,
    Schedule,
    SeatId,
    SeatNumber,
)
from services.shared.domain import Currency, IsoDateTime, Money

SEATS_PER_ROW = 6
SEAT_LETTERS = "ABCDEF"


class FlightDetails(TypedDict):
    """フライト作成の入力データ構造"""

    flight_number: str
    airline_name: str
    departure_airport: str
    arrival_airport: str
    departure_time: str
    arrival_time: str
    total_seats: int
    base_price: Decimal
    currency: str


class FlightFactory:
    """フライト集約のファクトリ

    - プリミティブ型から Value Object への変換
    - 座席表の生成（フライト作成時の1回のみ）
    - 初期状態の設定（SCHEDULED）
    """

    def create(self, details: FlightDetails) -> Flight:
        """新規フライトを生成する

        座席は1列6席（A-F）で floor(total_seats / 6) 列分を生成する。
        端数の座席は生成しないため、空席数は生成した座席数から始まる。
        """
        flight_id = FlightId.generate()
        base_price = Money(
            amount=Decimal(details["base_price"]),
            currency=Currency(details["currency"]),
        )
        if not base_price.is_positive():
            raise ValueError("Base price must be positive")

        seats = self.generate_seats(flight_id, details["total_seats"], base_price)

        return Flight(
            id=flight_id,
            flight_number=FlightNumber(details["flight_number"]),
            airline_name=details["airline_name"],
            departure_airport=AirportCode(details["departure_airport"]),
            arrival_airport=AirportCode(details["arrival_airport"]),
            schedule=Schedule(
                departure_time=IsoDateTime.from_string(details["departure_time"]),
                arrival_time=IsoDateTime.from_string(details["arrival_time"]),
            ),
            total_seats=details["total_seats"],
            available_seats=len(seats),
            base_price=base_price,
            status=FlightStatus.SCHEDULED,
            seats=seats,
        )

    @staticmethod
    def generate_seats(
        flight_id: FlightId, total_seats: int, base_price: Money
    ) -> list[Seat]:
        """座席表を生成する

        | 列     | クラス          | 価格          |
        |--------|-----------------|---------------|
        | 1-2    | FIRST_CLASS     | 基本運賃 x3   |
        | 3-5    | BUSINESS        | 基本運賃 x2   |
        | 6-10   | PREMIUM_ECONOMY | 基本運賃 x1.5 |
        | 11-    | ECONOMY         | 基本運賃 x1   |
        """
        if total_seats <= 0:
            raise ValueError("Total seats must be positive")

        seats: list[Seat] = []
        for row in range(1, total_seats // SEATS_PER_ROW + 1):
            seat_class = SeatClass.for_row(row)
            price = base_price.multiply(seat_class.price_multiplier)
            for letter in SEAT_LETTERS:
                seats.append(
                    Seat(
                        id=SeatId(flight_id, SeatNumber.of(row, letter)),
                        seat_class=seat_class,
                        price=price,
                        status=SeatStatus.AVAILABLE,
                    )
                )
        return seats
