from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from services.booking.domain.enum import BookingStatus


class CreateBookingRequest(BaseModel):
    """予約作成リクエストスキーマ"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    passenger_id: str = Field(..., min_length=1)
    flight_id: str = Field(..., min_length=1)
    seat_id: str = Field(
        ...,
        min_length=1,
        description="<フライトID>:<座席番号>",
        examples=["3f0c...:12C"],
    )


class ListBookingsQuery(BaseModel):
    """予約一覧のクエリパラメータ"""

    status: BookingStatus | None = None
