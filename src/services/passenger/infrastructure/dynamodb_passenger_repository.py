import os
from datetime import date

import boto3
from boto3.dynamodb.conditions import Key

from services.passenger.domain.entity import Passenger
from services.passenger.domain.repository import PassengerRepository
from services.passenger.domain.value_object import (
    Email,
    PassengerId,
    PassportNumber,
    PhoneNumber,
)
from services.shared.domain import (
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from services.shared.infrastructure import DynamoDBUnitOfWork, query_all


class DynamoDBPassengerRepository(PassengerRepository):
    """DynamoDBを使用した PassengerRepository の具象実装

    メールアドレス・旅券番号の一意性はロック用アイテムで保証する。
    """

    def __init__(self, uow: DynamoDBUnitOfWork, table_name: str | None = None) -> None:
        self._uow = uow
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, passenger: Passenger) -> None:
        self._uow.stage_put(
            self._to_item(passenger),
            on_conflict=DuplicateResourceException.of(
                "Passenger", "id", passenger.id
            ),
        )
        self._stage_lock(
            f"PASSENGER_EMAIL#{passenger.email}",
            passenger,
            DuplicateResourceException.of("Passenger", "email", passenger.email),
        )
        self._stage_lock(
            f"PASSENGER_PASSPORT#{passenger.passport_number}",
            passenger,
            DuplicateResourceException.of(
                "Passenger", "passportNumber", passenger.passport_number
            ),
        )

    def update(self, passenger: Passenger, previous: Passenger) -> None:
        conflict = OptimisticLockException(
            f"Passenger was modified concurrently: passenger_id={passenger.id}"
        )
        self._uow.stage_put(
            self._to_item(passenger),
            condition="email = :email AND passport_number = :passport",
            values={
                ":email": str(previous.email),
                ":passport": str(previous.passport_number),
            },
            on_conflict=conflict,
        )
        if passenger.email != previous.email:
            self._delete_lock(f"PASSENGER_EMAIL#{previous.email}", previous, conflict)
            self._stage_lock(
                f"PASSENGER_EMAIL#{passenger.email}",
                passenger,
                DuplicateResourceException.of("Passenger", "email", passenger.email),
            )
        if passenger.passport_number != previous.passport_number:
            self._delete_lock(
                f"PASSENGER_PASSPORT#{previous.passport_number}", previous, conflict
            )
            self._stage_lock(
                f"PASSENGER_PASSPORT#{passenger.passport_number}",
                passenger,
                DuplicateResourceException.of(
                    "Passenger", "passportNumber", passenger.passport_number
                ),
            )

    def delete(self, passenger: Passenger) -> None:
        self._uow.stage_delete(
            {"PK": f"PASSENGER#{passenger.id}", "SK": "METADATA"},
            on_conflict=ResourceNotFoundException.of("Passenger", passenger.id),
        )
        conflict = OptimisticLockException(
            f"Passenger was modified concurrently: passenger_id={passenger.id}"
        )
        self._delete_lock(f"PASSENGER_EMAIL#{passenger.email}", passenger, conflict)
        self._delete_lock(
            f"PASSENGER_PASSPORT#{passenger.passport_number}", passenger, conflict
        )

    def find_by_id(self, passenger_id: PassengerId) -> Passenger | None:
        response = self.table.get_item(
            Key={"PK": f"PASSENGER#{passenger_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_email(self, email: Email) -> Passenger | None:
        return self._find_by_lock(f"PASSENGER_EMAIL#{email}")

    def find_by_passport_number(
        self, passport_number: PassportNumber
    ) -> Passenger | None:
        return self._find_by_lock(f"PASSENGER_PASSPORT#{passport_number}")

    def find_all(self) -> list[Passenger]:
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("PASSENGERS"),
        )
        return [self._to_entity(item) for item in items]

    def _stage_lock(
        self, pk: str, passenger: Passenger, on_conflict: DuplicateResourceException
    ) -> None:
        self._uow.stage_put(
            {
                "PK": pk,
                "SK": "UNIQUE",
                "entity_type": "PASSENGER_LOCK",
                "passenger_id": str(passenger.id),
            },
            on_conflict=on_conflict,
        )

    def _delete_lock(
        self, pk: str, owner: Passenger, on_conflict: OptimisticLockException
    ) -> None:
        """ロック用アイテムを削除する（所有者が変わっていれば競合）"""
        self._uow.stage_delete(
            {"PK": pk, "SK": "UNIQUE"},
            condition="passenger_id = :passenger_id",
            values={":passenger_id": str(owner.id)},
            on_conflict=on_conflict,
        )

    def _find_by_lock(self, pk: str) -> Passenger | None:
        response = self.table.get_item(
            Key={"PK": pk, "SK": "UNIQUE"}, ConsistentRead=True
        )
        item = response.get("Item")
        if not item:
            return None
        return self.find_by_id(PassengerId(item["passenger_id"]))

    def _to_item(self, passenger: Passenger) -> dict:
        return {
            "PK": f"PASSENGER#{passenger.id}",
            "SK": "METADATA",
            "entity_type": "PASSENGER",
            "passenger_id": str(passenger.id),
            "first_name": passenger.first_name,
            "last_name": passenger.last_name,
            "email": str(passenger.email),
            "phone_number": str(passenger.phone_number),
            "date_of_birth": passenger.date_of_birth.isoformat(),
            "passport_number": str(passenger.passport_number),
            "nationality": passenger.nationality,
            "GSI1PK": "PASSENGERS",
            "GSI1SK": f"PASSENGER#{passenger.id}",
        }

    def _to_entity(self, item: dict) -> Passenger:
        return Passenger(
            id=PassengerId(item["passenger_id"]),
            first_name=item["first_name"],
            last_name=item["last_name"],
            email=Email(item["email"]),
            phone_number=PhoneNumber(item["phone_number"]),
            date_of_birth=date.fromisoformat(item["date_of_birth"]),
            passport_number=PassportNumber(item["passport_number"]),
            nationality=item["nationality"],
        )
