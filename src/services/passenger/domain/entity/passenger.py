from datetime import date

from services.passenger.domain.value_object import (
    Email,
    PassengerId,
    PassportNumber,
    PhoneNumber,
)
from services.shared.domain import AggregateRoot


class Passenger(AggregateRoot[PassengerId]):
    """乗客（メールアドレス・旅券番号はそれぞれ一意）"""

    def __init__(
        self,
        id: PassengerId,
        first_name: str,
        last_name: str,
        email: Email,
        phone_number: PhoneNumber,
        date_of_birth: date,
        passport_number: PassportNumber,
        nationality: str,
    ) -> None:
        super().__init__(id)

        self._first_name = first_name
        self._last_name = last_name
        self._email = email
        self._phone_number = phone_number
        self._date_of_birth = date_of_birth
        self._passport_number = passport_number
        self._nationality = nationality

        self._validate()

    def _validate(self) -> None:
        for field, value in (
            ("First name", self._first_name),
            ("Last name", self._last_name),
            ("Nationality", self._nationality),
        ):
            if not value or not value.strip():
                raise ValueError(f"{field} is required")

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def email(self) -> Email:
        return self._email

    @property
    def phone_number(self) -> PhoneNumber:
        return self._phone_number

    @property
    def date_of_birth(self) -> date:
        return self._date_of_birth

    @property
    def passport_number(self) -> PassportNumber:
        return self._passport_number

    @property
    def nationality(self) -> str:
        return self._nationality
