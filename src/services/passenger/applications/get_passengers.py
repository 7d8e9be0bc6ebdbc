from services.passenger.domain.entity import Passenger
from services.passenger.domain.repository import PassengerRepository
from services.passenger.domain.value_object import Email, PassengerId
from services.shared.domain import ResourceNotFoundException


class PassengerQueryService:
    """乗客の参照ユースケース"""

    def __init__(self, repository: PassengerRepository) -> None:
        self._repository = repository

    def get(self, passenger_id: str) -> Passenger:
        passenger = self._repository.find_by_id(PassengerId(passenger_id))
        if passenger is None:
            raise ResourceNotFoundException.of("Passenger", passenger_id)
        return passenger

    def get_by_email(self, email: str) -> Passenger:
        address = Email(email)
        passenger = self._repository.find_by_email(address)
        if passenger is None:
            raise ResourceNotFoundException.of("Passenger", address, "email")
        return passenger

    def list_all(self) -> list[Passenger]:
        return self._repository.find_all()
