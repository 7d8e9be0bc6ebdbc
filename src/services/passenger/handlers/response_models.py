from __future__ import annotations

from pydantic import BaseModel

from services.passenger.domain.entity import Passenger


class PassengerData(BaseModel):
    """乗客データのレスポンスモデル"""

    id: str
    first_name: str
    last_name: str
    email: str
    phone_number: str
    date_of_birth: str
    passport_number: str
    nationality: str


def to_passenger_data(passenger: Passenger) -> PassengerData:
    return PassengerData(
        id=str(passenger.id),
        first_name=passenger.first_name,
        last_name=passenger.last_name,
        email=str(passenger.email),
        phone_number=str(passenger.phone_number),
        date_of_birth=passenger.date_of_birth.isoformat(),
        passport_number=str(passenger.passport_number),
        nationality=passenger.nationality,
    )
