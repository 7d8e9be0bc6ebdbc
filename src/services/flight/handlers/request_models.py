from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from services.flight.domain.enum import FlightStatus
from services.search.domain import ExternalFlight
from services.shared.domain import IsoDateTime
from services.shared.utils.validators import normalize_code, to_decimal


class RequestModel(BaseModel):
    """snake_case / camelCase どちらのキーも受け付ける"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateAirportRequest(RequestModel):
    """空港登録リクエストスキーマ"""

    code: str = Field(
        ...,
        min_length=3,
        max_length=3,
        description="空港コード（IATA）",
        examples=["JFK"],
    )
    name: str = Field(..., min_length=1, examples=["John F. Kennedy International"])
    city: str = Field(..., min_length=1, examples=["New York"])
    country: str = Field(..., min_length=1, examples=["USA"])

    @field_validator("code", mode="before")
    @classmethod
    def normalize(cls, v):
        return normalize_code(v)


class UpdateAirportRequest(RequestModel):
    """空港更新リクエストスキーマ（空港コードはパスで指定）"""

    name: str = Field(..., min_length=1, examples=["John F. Kennedy International"])
    city: str = Field(..., min_length=1, examples=["New York"])
    country: str = Field(..., min_length=1, examples=["USA"])


class CreateFlightRequest(RequestModel):
    """フライト登録リクエストスキーマ"""

    flight_number: str = Field(
        ..., min_length=2, max_length=10, description="便名", examples=["AA101"]
    )
    airline_name: str = Field(..., min_length=1, examples=["American Airlines"])
    departure_airport_code: str = Field(..., min_length=3, max_length=3)
    arrival_airport_code: str = Field(..., min_length=3, max_length=3)

    departure_time: str = Field(
        ...,
        description="出発時刻（ISO 8601形式）",
        examples=["2026-01-01T10:00:00"],
    )
    arrival_time: str = Field(
        ...,
        description="到着時刻（ISO 8601形式）",
        examples=["2026-01-01T15:00:00"],
    )

    total_seats: int = Field(..., gt=0, description="総座席数", examples=[120])
    base_price: Decimal = Field(..., gt=0, description="基本運賃", examples=[100])
    currency: str = Field(default="USD", pattern="^[A-Z]{3}$", examples=["USD"])

    @field_validator(
        "flight_number", "departure_airport_code", "arrival_airport_code", mode="before"
    )
    @classmethod
    def normalize(cls, v):
        return normalize_code(v)

    @field_validator("base_price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        """Decimalに変換する"""
        return to_decimal(v)


class UpdateFlightStatusRequest(RequestModel):
    """運航ステータス更新リクエストスキーマ"""

    status: FlightStatus

    @field_validator("status", mode="before")
    @classmethod
    def upper(cls, v):
        return normalize_code(v)


class ListFlightsQuery(RequestModel):
    status: FlightStatus | None = None

    @field_validator("status", mode="before")
    @classmethod
    def upper(cls, v):
        return normalize_code(v)


class SearchFlightsRequest(RequestModel):
    """フライト検索リクエストスキーマ"""

    departure_airport_code: str = Field(..., min_length=3, max_length=3)
    arrival_airport_code: str = Field(..., min_length=3, max_length=3)
    departure_date: date = Field(..., examples=["2026-01-01"])

    @field_validator("departure_airport_code", "arrival_airport_code", mode="before")
    @classmethod
    def normalize(cls, v):
        return normalize_code(v)


class ListSeatsQuery(RequestModel):
    available: bool = False


class ExternalFlightRequest(RequestModel):
    """取得済みの外部フライト"""

    id: str = ""
    flight_number: str | None = None
    airline: str | None = None
    origin: str | None = None
    destination: str | None = None
    price: Decimal | None = None
    departure_time: str | None = None
    arrival_time: str | None = None

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return None if v is None else to_decimal(v)

    def to_domain(self) -> ExternalFlight:
        return ExternalFlight(
            id=self.id,
            flight_number=self.flight_number,
            airline=self.airline,
            origin=self.origin,
            destination=self.destination,
            price=self.price,
            departure_time=_parse_time(self.departure_time),
            arrival_time=_parse_time(self.arrival_time),
        )


class ImportExternalFlightRequest(RequestModel):
    """外部フライト取り込みリクエストスキーマ

    external_flight_id（便名）を指定するとプロバイダから取得し、
    external_flight を指定した場合はそのまま取り込む（こちらが優先）。
    """

    external_flight_id: str | None = None
    external_flight: ExternalFlightRequest | None = None

    @model_validator(mode="after")
    def require_source(self):
        blank_id = not self.external_flight_id or not self.external_flight_id.strip()
        if self.external_flight is None and blank_id:
            raise ValueError("Provide externalFlightId or externalFlight")
        return self


def _parse_time(value: str | None) -> IsoDateTime | None:
    return IsoDateTime.from_string(value) if value else None
