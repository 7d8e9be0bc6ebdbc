from aws_lambda_powertools import Logger

from services.flight.domain.entity import Flight
from services.flight.domain.factory import FlightDetails, FlightFactory
from services.flight.domain.repository import AirportRepository, FlightRepository
from services.flight.domain.value_object import AirportCode, FlightNumber
from services.shared.domain import (
    DuplicateResourceException,
    ResourceNotFoundException,
    UnitOfWork,
)

logger = Logger(child=True)


class CreateFlightService:
    """フライト登録ユースケース（座席表も同時に生成する）"""

    def __init__(
        self,
        uow: UnitOfWork,
        flight_repository: FlightRepository,
        airport_repository: AirportRepository,
        factory: FlightFactory,
    ) -> None:
        self._uow = uow
        self._flight_repository = flight_repository
        self._airport_repository = airport_repository
        self._factory = factory

    def create(self, details: FlightDetails) -> Flight:
        flight_number = FlightNumber(details["flight_number"])

        with self._uow:
            if self._flight_repository.find_by_flight_number(flight_number):
                raise DuplicateResourceException.of(
                    "Flight", "flightNumber", flight_number
                )
            for code in (details["departure_airport"], details["arrival_airport"]):
                airport_code = AirportCode(code)
                if self._airport_repository.find_by_id(airport_code) is None:
                    raise ResourceNotFoundException.of("Airport", airport_code, "code")

            flight = self._factory.create(details)
            self._flight_repository.save(flight)
            self._uow.commit()

        logger.info(
            "Flight created",
            extra={
                "flight_id": str(flight.id),
                "flight_number": str(flight.flight_number),
                "seats": len(flight.seats),
            },
        )
        return flight
