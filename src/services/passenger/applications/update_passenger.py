from aws_lambda_powertools import Logger

from services.passenger.domain.entity import Passenger
from services.passenger.domain.factory import PassengerDetails, PassengerFactory
from services.passenger.domain.repository import PassengerRepository
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import (
    DuplicateResourceException,
    ResourceNotFoundException,
    UnitOfWork,
)

logger = Logger(child=True)


class UpdatePassengerService:
    """乗客情報の更新ユースケース

    メールアドレス・旅券番号を変更する場合は、他の乗客と重複しないこと。
    """

    def __init__(
        self,
        uow: UnitOfWork,
        repository: PassengerRepository,
        factory: PassengerFactory,
    ) -> None:
        self._uow = uow
        self._repository = repository
        self._factory = factory

    def update(self, passenger_id: str, details: PassengerDetails) -> Passenger:
        with self._uow:
            current = self._repository.find_by_id(PassengerId(passenger_id))
            if current is None:
                raise ResourceNotFoundException.of("Passenger", passenger_id)

            passenger = self._factory.rebuild(current.id, details)

            if (
                passenger.email != current.email
                and self._repository.find_by_email(passenger.email) is not None
            ):
                raise DuplicateResourceException.of(
                    "Passenger", "email", passenger.email
                )
            if (
                passenger.passport_number != current.passport_number
                and self._repository.find_by_passport_number(passenger.passport_number)
                is not None
            ):
                raise DuplicateResourceException.of(
                    "Passenger", "passportNumber", passenger.passport_number
                )

            self._repository.update(passenger, previous=current)
            self._uow.commit()

        logger.info("Passenger updated", extra={"passenger_id": passenger_id})
        return passenger
