import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId, BookingReference
from services.flight.domain.value_object import FlightId, SeatId
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import (
    Currency,
    DuplicateResourceException,
    IsoDateTime,
    Money,
    OptimisticLockException,
)
from services.shared.infrastructure import DynamoDBUnitOfWork, query_all


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用した BookingRepository の具象実装

    - GSI1: 予約一覧（BOOKINGS）
    - GSI2: 乗客ごとの予約（PASSENGER#<乗客ID>）
    - 予約番号の一意性はロック用アイテム（BOOKING_REF#<予約番号>）で保証する
    """

    def __init__(self, uow: DynamoDBUnitOfWork, table_name: str | None = None) -> None:
        self._uow = uow
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, booking: Booking) -> None:
        created_at = str(booking.created_at)
        item = {
            "PK": f"BOOKING#{booking.id}",
            "SK": "METADATA",
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "booking_reference": str(booking.reference),
            "passenger_id": str(booking.passenger_id),
            "flight_id": str(booking.flight_id),
            "seat_id": str(booking.seat_id),
            "total_price": str(booking.total_price.amount),
            "currency": str(booking.total_price.currency),
            "status": booking.status.value,
            "created_at": created_at,
            "GSI1PK": "BOOKINGS",
            "GSI1SK": created_at,
            "GSI2PK": f"PASSENGER#{booking.passenger_id}",
            "GSI2SK": created_at,
        }
        self._uow.stage_put(
            item,
            on_conflict=DuplicateResourceException.of("Booking", "id", booking.id),
        )
        self._uow.stage_put(
            {
                "PK": f"BOOKING_REF#{booking.reference}",
                "SK": "UNIQUE",
                "entity_type": "BOOKING_REF",
                "booking_id": str(booking.id),
            },
            on_conflict=DuplicateResourceException.of(
                "Booking", "bookingReference", booking.reference
            ),
        )

    def update(self, booking: Booking, expected_status: BookingStatus) -> None:
        self._uow.stage_update(
            key={"PK": f"BOOKING#{booking.id}", "SK": "METADATA"},
            update_expression="SET #status = :status, updated_at = :updated_at",
            condition="#status = :expected",
            names={"#status": "status"},
            values={
                ":status": booking.status.value,
                ":expected": expected_status.value,
                ":updated_at": str(IsoDateTime.now()),
            },
            on_conflict=OptimisticLockException(
                f"Booking status conflict: expected {expected_status.value}, "
                f"booking_id={booking.id}"
            ),
        )

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_reference(self, reference: BookingReference) -> Booking | None:
        response = self.table.get_item(
            Key={"PK": f"BOOKING_REF#{reference}", "SK": "UNIQUE"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self.find_by_id(BookingId(item["booking_id"]))

    def find_by_passenger_id(self, passenger_id: PassengerId) -> list[Booking]:
        items = query_all(
            self.table,
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq(f"PASSENGER#{passenger_id}"),
        )
        return [self._to_entity(item) for item in items]

    def find_by_flight_id(self, flight_id: FlightId) -> list[Booking]:
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("BOOKINGS"),
            FilterExpression=Attr("flight_id").eq(str(flight_id)),
        )
        return [self._to_entity(item) for item in items]

    def find_all(self, status: BookingStatus | None = None) -> list[Booking]:
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq("BOOKINGS"),
        }
        if status is not None:
            kwargs["FilterExpression"] = Attr("status").eq(status.value)
        return [self._to_entity(item) for item in query_all(self.table, **kwargs)]

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(item["booking_id"]),
            reference=BookingReference(item["booking_reference"]),
            passenger_id=PassengerId(item["passenger_id"]),
            flight_id=FlightId(item["flight_id"]),
            seat_id=SeatId.from_string(item["seat_id"]),
            total_price=Money(
                amount=Decimal(item["total_price"]),
                currency=Currency(item["currency"]),
            ),
            created_at=IsoDateTime.from_string(item["created_at"]),
            status=BookingStatus(item["status"]),
        )
