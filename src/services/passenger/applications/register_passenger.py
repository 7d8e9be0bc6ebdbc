from aws_lambda_powertools import Logger

from services.passenger.domain.entity import Passenger
from services.passenger.domain.factory import PassengerDetails, PassengerFactory
from services.passenger.domain.repository import PassengerRepository
from services.shared.domain import DuplicateResourceException, UnitOfWork

logger = Logger(child=True)


class RegisterPassengerService:
    """乗客登録ユースケース"""

    def __init__(
        self,
        uow: UnitOfWork,
        repository: PassengerRepository,
        factory: PassengerFactory,
    ) -> None:
        self._uow = uow
        self._repository = repository
        self._factory = factory

    def register(self, details: PassengerDetails) -> Passenger:
        passenger = self._factory.create(details)

        with self._uow:
            if self._repository.find_by_email(passenger.email) is not None:
                raise DuplicateResourceException.of(
                    "Passenger", "email", passenger.email
                )
            if (
                self._repository.find_by_passport_number(passenger.passport_number)
                is not None
            ):
                raise DuplicateResourceException.of(
                    "Passenger", "passportNumber", passenger.passport_number
                )
            self._repository.save(passenger)
            self._uow.commit()

        logger.info("Passenger registered", extra={"passenger_id": str(passenger.id)})
        return passenger
