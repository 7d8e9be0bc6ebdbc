from datetime import date

from aws_lambda_powertools import Logger

from services.flight.applications.get_flights import FlightQueryService
from services.flight.domain.entity import Flight
from services.flight.domain.repository import AirportRepository
from services.flight.domain.value_object import AirportCode
from services.search.domain import (
    ExternalFlight,
    ExternalFlightProvider,
    FlightSource,
    UnifiedFlight,
    estimate_price,
)

logger = Logger(child=True)


class SearchUnifiedService:
    """内部フライトと外部フライトを1つの一覧にまとめる検索

    - 内部フライトを先に、外部フライトをその後ろに並べる（重複排除・並べ替えはしない）
    - 予約できるのは内部フライトのみ
    """

    def __init__(
        self,
        flight_query: FlightQueryService,
        airport_repository: AirportRepository,
        provider: ExternalFlightProvider,
    ) -> None:
        self._flight_query = flight_query
        self._airport_repository = airport_repository
        self._provider = provider

    def search(
        self,
        departure_code: str,
        arrival_code: str,
        departure_date: date,
        include_external: bool = True,
    ) -> list[UnifiedFlight]:
        dep = departure_code.strip().upper()
        arr = arrival_code.strip().upper()

        internal = self._flight_query.search(dep, arr, departure_date)
        results = [self._from_internal(f) for f in internal]

        external_count = 0
        if include_external:
            external = self._provider.fetch_by_route(dep, arr)
            external_count = len(external)
            results.extend(self._from_external(f) for f in external)

        logger.info(
            "Unified search completed",
            extra={
                "route": f"{dep}-{arr}",
                "internal": len(internal),
                "external": external_count,
            },
        )
        return results

    def _from_internal(self, flight: Flight) -> UnifiedFlight:
        return UnifiedFlight(
            source=FlightSource.INTERNAL,
            bookable=True,
            internal_flight_id=str(flight.id),
            id=str(flight.id),
            flight_number=str(flight.flight_number),
            airline_name=flight.airline_name,
            departure_airport_code=str(flight.departure_airport),
            arrival_airport_code=str(flight.arrival_airport),
            departure_airport_name=self._airport_name(flight.departure_airport),
            arrival_airport_name=self._airport_name(flight.arrival_airport),
            base_price=flight.base_price.amount,
            departure_time=flight.departure_time,
            arrival_time=flight.arrival_time,
            total_seats=flight.total_seats,
            available_seats=flight.available_seats,
        )

    def _from_external(self, flight: ExternalFlight) -> UnifiedFlight:
        price = flight.price
        if price is None:
            price = estimate_price(flight.origin, flight.destination)
        return UnifiedFlight(
            source=FlightSource.EXTERNAL,
            bookable=False,
            internal_flight_id=None,
            id=flight.id,
            flight_number=flight.flight_number,
            airline_name=flight.airline,
            departure_airport_code=flight.origin,
            arrival_airport_code=flight.destination,
            departure_airport_name=flight.origin,
            arrival_airport_name=flight.destination,
            base_price=price,
            departure_time=flight.departure_time,
            arrival_time=flight.arrival_time,
        )

    def _airport_name(self, code: AirportCode) -> str | None:
        airport = self._airport_repository.find_by_id(code)
        return airport.name if airport else None
