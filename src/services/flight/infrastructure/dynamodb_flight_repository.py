import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key

from services.flight.domain.entity import Flight, Seat
from services.flight.domain.enum import FlightStatus, SeatClass, SeatStatus
from services.flight.domain.event import FlightStatusChanged, SeatStatusChanged
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import (
    AirportCode,
    FlightId,
    FlightNumber,
    Schedule,
    SeatId,
    SeatNumber,
)
from services.shared.domain import (
    Currency,
    DuplicateResourceException,
    IsoDateTime,
    Money,
    OptimisticLockException,
)
from services.shared.infrastructure import DynamoDBUnitOfWork, query_all


class DynamoDBFlightRepository(FlightRepository):
    """DynamoDBを使用した FlightRepository の具象実装

    座席はフライトアイテムの `seats` マップ属性として保持する。
    便名の一意性はロック用アイテム（FLIGHT_NUMBER#<便名>）で保証する。
    """

    def __init__(self, uow: DynamoDBUnitOfWork, table_name: str | None = None) -> None:
        self._uow = uow
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, flight: Flight) -> None:
        flight.flush_domain_events()
        duplicate = DuplicateResourceException.of(
            "Flight", "flightNumber", flight.flight_number
        )
        self._uow.stage_put(to_item(flight), on_conflict=duplicate)
        self._uow.stage_put(
            {
                "PK": f"FLIGHT_NUMBER#{flight.flight_number}",
                "SK": "UNIQUE",
                "entity_type": "FLIGHT_NUMBER",
                "flight_id": str(flight.id),
            },
            on_conflict=duplicate,
        )

    def update(self, flight: Flight) -> None:
        update = build_update(flight.flush_domain_events())
        if update is None:
            return
        update_expression, condition, names, values = update
        self._uow.stage_update(
            key={"PK": f"FLIGHT#{flight.id}", "SK": "METADATA"},
            update_expression=update_expression,
            condition=condition,
            names=names,
            values=values,
            on_conflict=OptimisticLockException(
                f"Flight was modified concurrently: flight_id={flight.id}"
            ),
        )

    def delete(self, flight: Flight) -> None:
        conflict = OptimisticLockException(
            f"Flight was modified concurrently: flight_id={flight.id}"
        )
        self._uow.stage_delete(
            {"PK": f"FLIGHT#{flight.id}", "SK": "METADATA"},
            condition="available_seats = :available",
            values={":available": flight.available_seats},
            on_conflict=conflict,
        )
        self._uow.stage_delete(
            {"PK": f"FLIGHT_NUMBER#{flight.flight_number}", "SK": "UNIQUE"},
            condition="flight_id = :flight_id",
            values={":flight_id": str(flight.id)},
            on_conflict=conflict,
        )

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        response = self.table.get_item(
            Key={"PK": f"FLIGHT#{flight_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return to_entity(item)

    def find_by_flight_number(self, flight_number: FlightNumber) -> Flight | None:
        response = self.table.get_item(
            Key={"PK": f"FLIGHT_NUMBER#{flight_number}", "SK": "UNIQUE"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self.find_by_id(FlightId(item["flight_id"]))

    def find_all(self, status: FlightStatus | None = None) -> list[Flight]:
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq("FLIGHTS"),
        }
        if status is not None:
            kwargs["FilterExpression"] = Attr("status").eq(status.value)
        return [to_entity(item) for item in query_all(self.table, **kwargs)]

    def search(
        self,
        departure_airport: AirportCode,
        arrival_airport: AirportCode,
        departure_from: IsoDateTime,
        departure_until: IsoDateTime,
    ) -> list[Flight]:
        items = query_all(
            self.table,
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq(
                f"ROUTE#{departure_airport}#{arrival_airport}"
            )
            & Key("GSI2SK").between(str(departure_from), str(departure_until)),
            FilterExpression=Attr("status").eq(FlightStatus.SCHEDULED.value)
            & Attr("available_seats").gt(0)
            & Attr("departure_time").lt(str(departure_until)),
        )
        return [to_entity(item) for item in items]


def build_update(events: list) -> tuple[str, str, dict, dict] | None:
    """ドメインイベントを1つの条件付き UpdateExpression に変換する

    - 座席ごとに最初の遷移元を条件、最後の遷移先を更新値とする
    - 空席数は AVAILABLE への出入りの差分だけ増減する
    - 空席を減らす場合は空席数が足りること、かつ SCHEDULED であることを条件とする
    """
    seat_changes: dict[SeatNumber, tuple[SeatStatus, SeatStatus]] = {}
    flight_change: tuple[FlightStatus, FlightStatus] | None = None

    for event in events:
        if isinstance(event, SeatStatusChanged):
            previous = seat_changes.get(event.seat_number, (event.previous,))[0]
            seat_changes[event.seat_number] = (previous, event.current)
        elif isinstance(event, FlightStatusChanged):
            previous = flight_change[0] if flight_change else event.previous
            flight_change = (previous, event.current)

    names: dict = {}
    values: dict = {}
    sets: list[str] = []
    conditions: list[str] = []
    delta = 0

    for i, (seat_number, (previous, current)) in enumerate(seat_changes.items()):
        if previous == current:
            continue
        names["#status"] = "status"
        names[f"#s{i}"] = str(seat_number)
        values[f":from{i}"] = previous.value
        values[f":to{i}"] = current.value
        sets.append(f"seats.#s{i}.#status = :to{i}")
        conditions.append(f"seats.#s{i}.#status = :from{i}")
        if current == SeatStatus.AVAILABLE:
            delta += 1
        elif previous == SeatStatus.AVAILABLE:
            delta -= 1

    if delta:
        values[":delta"] = delta
        sets.append("available_seats = available_seats + :delta")
    if delta < 0:
        values[":required"] = -delta
        values[":scheduled"] = FlightStatus.SCHEDULED.value
        names["#status"] = "status"
        conditions.append("available_seats >= :required")
        conditions.append("#status = :scheduled")

    if flight_change is not None and flight_change[0] != flight_change[1]:
        names["#status"] = "status"
        values[":flight_from"] = flight_change[0].value
        values[":flight_to"] = flight_change[1].value
        sets.append("#status = :flight_to")
        conditions.append("#status = :flight_from")

    if not sets:
        return None

    return (
        "SET " + ", ".join(sets),
        " AND ".join(conditions),
        names,
        values,
    )


def to_item(flight: Flight) -> dict:
    """Flight 集約を DynamoDB アイテムに変換する"""
    departure_time = str(flight.departure_time)
    return {
        "PK": f"FLIGHT#{flight.id}",
        "SK": "METADATA",
        "entity_type": "FLIGHT",
        "flight_id": str(flight.id),
        "flight_number": str(flight.flight_number),
        "airline_name": flight.airline_name,
        "departure_airport": str(flight.departure_airport),
        "arrival_airport": str(flight.arrival_airport),
        "departure_time": departure_time,
        "arrival_time": str(flight.arrival_time),
        "total_seats": flight.total_seats,
        "available_seats": flight.available_seats,
        "base_price": str(flight.base_price.amount),
        "currency": str(flight.base_price.currency),
        "status": flight.status.value,
        "seats": {
            str(seat.seat_number): {
                "seat_class": seat.seat_class.value,
                "price": str(seat.price.amount),
                "status": seat.status.value,
            }
            for seat in flight.seats
        },
        "GSI1PK": "FLIGHTS",
        "GSI1SK": departure_time,
        "GSI2PK": f"ROUTE#{flight.departure_airport}#{flight.arrival_airport}",
        "GSI2SK": departure_time,
    }


def to_entity(item: dict) -> Flight:
    """DynamoDB アイテムを Flight 集約に変換する"""
    flight_id = FlightId(item["flight_id"])
    currency = Currency(item["currency"])
    seats = [
        Seat(
            id=SeatId(flight_id, SeatNumber(seat_number)),
            seat_class=SeatClass(attrs["seat_class"]),
            price=Money(amount=Decimal(attrs["price"]), currency=currency),
            status=SeatStatus(attrs["status"]),
        )
        for seat_number, attrs in item.get("seats", {}).items()
    ]
    return Flight(
        id=flight_id,
        flight_number=FlightNumber(item["flight_number"]),
        airline_name=item["airline_name"],
        departure_airport=AirportCode(item["departure_airport"]),
        arrival_airport=AirportCode(item["arrival_airport"]),
        schedule=Schedule(
            departure_time=IsoDateTime.from_string(item["departure_time"]),
            arrival_time=IsoDateTime.from_string(item["arrival_time"]),
        ),
        total_seats=int(item["total_seats"]),
        available_seats=int(item["available_seats"]),
        base_price=Money(amount=Decimal(item["base_price"]), currency=currency),
        status=FlightStatus(item["status"]),
        seats=seats,
    )
