from aws_lambda_powertools import Logger

from services.flight.domain.repository import AirportRepository, FlightRepository
from services.flight.domain.value_object import AirportCode
from services.shared.domain import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
    UnitOfWork,
)

logger = Logger(child=True)


class DeleteAirportService:
    """空港削除ユースケース

    出発地・到着地としてフライトから参照されている空港は削除できない。
    """

    def __init__(
        self,
        uow: UnitOfWork,
        airport_repository: AirportRepository,
        flight_repository: FlightRepository,
    ) -> None:
        self._uow = uow
        self._airport_repository = airport_repository
        self._flight_repository = flight_repository

    def delete(self, code: str) -> None:
        airport_code = AirportCode(code)

        with self._uow:
            airport = self._airport_repository.find_by_id(airport_code)
            if airport is None:
                raise ResourceNotFoundException.of("Airport", airport_code, "code")

            in_use = [
                f
                for f in self._flight_repository.find_all()
                if airport_code in (f.departure_airport, f.arrival_airport)
            ]
            if in_use:
                raise BusinessRuleViolationException(
                    f"Cannot delete airport {airport_code}: "
                    f"used by {len(in_use)} flight(s)"
                )

            self._airport_repository.delete(airport)
            self._uow.commit()

        logger.info("Airport deleted", extra={"code": str(airport_code)})
