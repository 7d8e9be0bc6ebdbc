from aws_lambda_powertools import Logger

from services.flight.domain.entity import Airport
from services.flight.domain.repository import AirportRepository
from services.flight.domain.value_object import AirportCode
from services.shared.domain import ResourceNotFoundException, UnitOfWork

logger = Logger(child=True)


class UpdateAirportService:
    """空港情報の更新ユースケース（空港コードは変更不可）"""

    def __init__(self, uow: UnitOfWork, repository: AirportRepository) -> None:
        self._uow = uow
        self._repository = repository

    def update(self, code: str, name: str, city: str, country: str) -> Airport:
        airport_code = AirportCode(code)

        with self._uow:
            airport = self._repository.find_by_id(airport_code)
            if airport is None:
                raise ResourceNotFoundException.of("Airport", airport_code, "code")
            airport.update_details(name=name, city=city, country=country)
            self._repository.update(airport)
            self._uow.commit()

        logger.info("Airport updated", extra={"code": str(airport_code)})
        return airport
