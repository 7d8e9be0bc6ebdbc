from aws_lambda_powertools import Logger

from services.flight.domain.entity import Flight
from services.flight.domain.enum import FlightStatus
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightId
from services.shared.domain import ResourceNotFoundException, UnitOfWork

logger = Logger(child=True)


class UpdateFlightStatusService:
    """運航ステータス更新ユースケース"""

    def __init__(self, uow: UnitOfWork, repository: FlightRepository) -> None:
        self._uow = uow
        self._repository = repository

    def update(self, flight_id: str, status: FlightStatus) -> Flight:
        with self._uow:
            flight = self._repository.find_by_id(FlightId(flight_id))
            if flight is None:
                raise ResourceNotFoundException.of("Flight", flight_id)
            previous = flight.status
            flight.change_status(status)
            self._repository.update(flight)
            self._uow.commit()

        logger.info(
            "Flight status updated",
            extra={
                "flight_id": flight_id,
                "previous": previous.value,
                "current": status.value,
            },
        )
        return flight
