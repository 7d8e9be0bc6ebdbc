from collections.abc import Callable
from datetime import date, timedelta
from decimal import Decimal

from aws_lambda_powertools import Logger

from services.flight.domain.entity import Airport, Flight
from services.flight.domain.factory import FlightDetails, FlightFactory
from services.flight.domain.repository import AirportRepository, FlightRepository
from services.flight.domain.value_object import AirportCode, FlightNumber
from services.search.domain import ExternalFlight
from services.shared.domain import (
    DuplicateResourceException,
    InvalidBookingException,
    IsoDateTime,
    UnitOfWork,
)

logger = Logger(child=True)

DEFAULT_ORIGIN = "XXX"
DEFAULT_DESTINATION = "YYY"
DEFAULT_AIRLINE = "Unknown"
DEFAULT_PRICE = Decimal("199.99")
DEFAULT_DURATION = timedelta(hours=2)
IMPORTED_TOTAL_SEATS = 120


class ImportExternalFlightService:
    """外部フライト取り込みユースケース

    未登録の空港は仮の空港として作成し、フライトと座席表を生成して
    予約可能な内部フライトにする。空港とフライトは1つの UnitOfWork で書き込む。
    """

    def __init__(
        self,
        uow: UnitOfWork,
        flight_repository: FlightRepository,
        airport_repository: AirportRepository,
        factory: FlightFactory,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._uow = uow
        self._flight_repository = flight_repository
        self._airport_repository = airport_repository
        self._factory = factory
        self._today = today

    def import_flight(self, external: ExternalFlight) -> Flight:
        if not external.flight_number or not external.flight_number.strip():
            raise InvalidBookingException("External flight number is required")
        flight_number = FlightNumber(external.flight_number)

        origin = _normalize(external.origin, DEFAULT_ORIGIN)
        destination = _normalize(external.destination, DEFAULT_DESTINATION)

        with self._uow:
            if self._flight_repository.find_by_flight_number(flight_number):
                raise DuplicateResourceException.of(
                    "Flight", "flightNumber", flight_number
                )
            if origin == destination:
                raise InvalidBookingException(
                    "Departure and arrival airports cannot be the same"
                )

            departure_airport = self._get_or_create_airport(AirportCode(origin))
            arrival_airport = self._get_or_create_airport(AirportCode(destination))

            departure_time = external.departure_time or IsoDateTime.at(
                self._today(), 10
            )
            arrival_time = external.arrival_time or departure_time.plus(
                DEFAULT_DURATION
            )
            if not arrival_time.is_after(departure_time):
                arrival_time = departure_time.plus(DEFAULT_DURATION)

            price = external.price
            if price is None or price <= 0:
                price = DEFAULT_PRICE

            details: FlightDetails = {
                "flight_number": str(flight_number),
                "airline_name": external.airline or DEFAULT_AIRLINE,
                "departure_airport": str(departure_airport.code),
                "arrival_airport": str(arrival_airport.code),
                "departure_time": str(departure_time),
                "arrival_time": str(arrival_time),
                "total_seats": IMPORTED_TOTAL_SEATS,
                "base_price": price,
                "currency": "USD",
            }
            flight = self._factory.create(details)
            self._flight_repository.save(flight)
            self._uow.commit()

        logger.info(
            "External flight imported",
            extra={
                "external_id": external.id,
                "flight_id": str(flight.id),
                "flight_number": str(flight.flight_number),
            },
        )
        return flight

    def _get_or_create_airport(self, code: AirportCode) -> Airport:
        airport = self._airport_repository.find_by_id(code)
        if airport is not None:
            return airport
        airport = Airport.placeholder(code)
        self._airport_repository.save(airport)
        logger.info("Placeholder airport staged", extra={"code": str(code)})
        return airport


def _normalize(code: str | None, default: str) -> str:
    if code is None or not code.strip():
        return default
    return code.strip().upper()
