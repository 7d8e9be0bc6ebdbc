import os

import boto3
from boto3.dynamodb.conditions import Attr, Key

from services.flight.domain.entity import Airport
from services.flight.domain.repository import AirportRepository
from services.flight.domain.value_object import AirportCode
from services.shared.domain import DuplicateResourceException, ResourceNotFoundException
from services.shared.infrastructure import DynamoDBUnitOfWork, query_all


class DynamoDBAirportRepository(AirportRepository):
    """DynamoDBを使用した AirportRepository の具象実装"""

    def __init__(self, uow: DynamoDBUnitOfWork, table_name: str | None = None) -> None:
        self._uow = uow
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, airport: Airport) -> None:
        self._uow.stage_put(
            self._to_item(airport),
            on_conflict=DuplicateResourceException.of("Airport", "code", airport.code),
        )

    def update(self, airport: Airport) -> None:
        self._uow.stage_put(
            self._to_item(airport),
            condition="attribute_exists(PK)",
            on_conflict=ResourceNotFoundException.of("Airport", airport.code, "code"),
        )

    def delete(self, airport: Airport) -> None:
        self._uow.stage_delete(
            {"PK": f"AIRPORT#{airport.code}", "SK": "METADATA"},
            on_conflict=ResourceNotFoundException.of("Airport", airport.code, "code"),
        )

    def find_by_id(self, code: AirportCode) -> Airport | None:
        response = self.table.get_item(
            Key={"PK": f"AIRPORT#{code}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self, city: str | None = None) -> list[Airport]:
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq("AIRPORTS"),
        }
        if city:
            kwargs["FilterExpression"] = Attr("city").eq(city)
        return [self._to_entity(item) for item in query_all(self.table, **kwargs)]

    def _to_item(self, airport: Airport) -> dict:
        return {
            "PK": f"AIRPORT#{airport.code}",
            "SK": "METADATA",
            "entity_type": "AIRPORT",
            "code": str(airport.code),
            "name": airport.name,
            "city": airport.city,
            "country": airport.country,
            "GSI1PK": "AIRPORTS",
            "GSI1SK": f"AIRPORT#{airport.code}",
        }

    def _to_entity(self, item: dict) -> Airport:
        return Airport(
            code=AirportCode(item["code"]),
            name=item["name"],
            city=item["city"],
            country=item["country"],
        )
