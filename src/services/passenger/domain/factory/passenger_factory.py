from datetime import date
from typing import Callable, TypedDict

from services.passenger.domain.entity import Passenger
from services.passenger.domain.value_object import (
    Email,
    PassengerId,
    PassportNumber,
    PhoneNumber,
)


class PassengerDetails(TypedDict):
    """乗客登録の入力データ構造"""

    first_name: str
    last_name: str
    email: str
    phone_number: str
    date_of_birth: date
    passport_number: str
    nationality: str


class PassengerFactory:
    """乗客エンティティのファクトリ"""

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today

    def create(self, details: PassengerDetails) -> Passenger:
        """新規乗客を生成する（生年月日は過去の日付のみ）"""
        return self._build(PassengerId.generate(), details)

    def rebuild(
        self, passenger_id: PassengerId, details: PassengerDetails
    ) -> Passenger:
        """既存の乗客IDのまま内容を置き換えた乗客を生成する"""
        return self._build(passenger_id, details)

    def _build(self, passenger_id: PassengerId, details: PassengerDetails) -> Passenger:
        if details["date_of_birth"] >= self._today():
            raise ValueError("Date of birth must be in the past")

        return Passenger(
            id=passenger_id,
            first_name=details["first_name"].strip(),
            last_name=details["last_name"].strip(),
            email=Email(details["email"]),
            phone_number=PhoneNumber(details["phone_number"]),
            date_of_birth=details["date_of_birth"],
            passport_number=PassportNumber(details["passport_number"]),
            nationality=details["nationality"].strip(),
        )
