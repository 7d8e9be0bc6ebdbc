from aws_lambda_powertools import Logger

from services.flight.domain.entity import Airport
from services.flight.domain.repository import AirportRepository
from services.flight.domain.value_object import AirportCode
from services.shared.domain import DuplicateResourceException, UnitOfWork

logger = Logger(child=True)


class CreateAirportService:
    """空港登録ユースケース"""

    def __init__(self, uow: UnitOfWork, repository: AirportRepository) -> None:
        self._uow = uow
        self._repository = repository

    def create(self, code: str, name: str, city: str, country: str) -> Airport:
        airport = Airport(code=AirportCode(code), name=name, city=city, country=country)

        with self._uow:
            if self._repository.find_by_id(airport.code) is not None:
                raise DuplicateResourceException.of("Airport", "code", airport.code)
            self._repository.save(airport)
            self._uow.commit()

        logger.info("Airport created", extra={"code": str(airport.code)})
        return airport
