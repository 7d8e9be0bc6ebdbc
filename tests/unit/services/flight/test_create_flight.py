from decimal import Decimal

import pytest

from services.flight.applications.create_airport import CreateAirportService
from services.flight.applications.create_flight import CreateFlightService
from services.flight.applications.get_airports import AirportQueryService
from services.flight.applications.update_flight_status import (
    UpdateFlightStatusService,
)
from services.flight.domain.enum import FlightStatus
from services.flight.domain.factory import FlightDetails, FlightFactory
from services.shared.domain import (
    DuplicateResourceException,
    InvalidBookingException,
    ResourceNotFoundException,
)


@pytest.fixture
def service(repos):
    return CreateFlightService(
        uow=repos.uow,
        flight_repository=repos.flights,
        airport_repository=repos.airports,
        factory=FlightFactory(),
    )


@pytest.fixture
def details():
    def _factory(**overrides) -> FlightDetails:
        d: FlightDetails = {
            "flight_number": "AA101",
            "airline_name": "American Airlines",
            "departure_airport": "JFK",
            "arrival_airport": "LAX",
            "departure_time": "2026-12-01T10:00:00",
            "arrival_time": "2026-12-01T15:00:00",
            "total_seats": 60,
            "base_price": Decimal("299.99"),
            "currency": "USD",
        }
        d.update(overrides)
        return d

    return _factory


class TestCreateAirportService:
    def test_duplicate_code_raises(self, repos):
        service = CreateAirportService(uow=repos.uow, repository=repos.airports)
        service.create("JFK", "John F. Kennedy", "New York", "USA")

        with pytest.raises(DuplicateResourceException):
            service.create("jfk", "Other", "New York", "USA")


class TestAirportQueryService:
    def test_get_and_filter_by_city(self, repos):
        CreateAirportService(uow=repos.uow, repository=repos.airports).create(
            "HND", "Haneda", "Tokyo", "Japan"
        )
        query = AirportQueryService(repos.airports)

        assert query.get("hnd").name == "Haneda"
        assert [str(a.code) for a in query.list_all(city="tokyo")] == ["HND"]
        assert query.list_all(city="Osaka") == []

    def test_unknown_airport(self, repos):
        with pytest.raises(ResourceNotFoundException, match="Airport not found"):
            AirportQueryService(repos.airports).get("XYZ")


class TestCreateFlightService:
    """フライト登録ユースケースのテスト"""

    def test_create_persists_flight_with_seats(
        self, service, details, add_airport, repos
    ):
        # Arrange
        add_airport("JFK")
        add_airport("LAX")

        # Act
        flight = service.create(details())

        # Assert
        stored = repos.flights.find_by_id(flight.id)
        assert stored.status == FlightStatus.SCHEDULED
        assert stored.available_seats == 60
        assert len(stored.seats) == 60

    def test_duplicate_flight_number_raises(self, service, details, add_airport):
        add_airport("JFK")
        add_airport("LAX")
        service.create(details())

        with pytest.raises(DuplicateResourceException):
            service.create(details(flight_number="aa101"))

    def test_unknown_airport_raises_not_found(self, service, details, add_airport):
        add_airport("JFK")

        with pytest.raises(ResourceNotFoundException, match="Airport not found"):
            service.create(details())

    def test_same_airports_raise_invalid_booking(
        self, service, details, add_airport, store
    ):
        add_airport("JFK")

        with pytest.raises(InvalidBookingException):
            service.create(details(arrival_airport="JFK"))
        assert store.flights == {}


class TestUpdateFlightStatusService:
    def test_status_change_is_persisted(self, repos, add_flight):
        flight = add_flight()
        service = UpdateFlightStatusService(uow=repos.uow, repository=repos.flights)

        service.update(str(flight.id), FlightStatus.CANCELLED)

        assert repos.flights.find_by_id(flight.id).status == FlightStatus.CANCELLED

    def test_unknown_flight_raises(self, repos):
        service = UpdateFlightStatusService(uow=repos.uow, repository=repos.flights)

        with pytest.raises(ResourceNotFoundException):
            service.update("missing", FlightStatus.CANCELLED)
