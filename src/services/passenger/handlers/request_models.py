from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RegisterPassengerRequest(BaseModel):
    """乗客登録リクエストスキーマ"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str = Field(..., min_length=1, examples=["Taro"])
    last_name: str = Field(..., min_length=1, examples=["Yamada"])
    email: str = Field(..., min_length=3, examples=["taro@example.com"])
    phone_number: str = Field(
        ..., pattern=r"^\d{10}$", description="数字10桁", examples=["0312345678"]
    )
    date_of_birth: date = Field(..., examples=["1990-01-01"])
    passport_number: str = Field(..., min_length=1, examples=["TK1234567"])
    nationality: str = Field(..., min_length=1, examples=["Japan"])


class UpdatePassengerRequest(RegisterPassengerRequest):
    """乗客更新リクエストスキーマ（全項目を置き換える）"""
