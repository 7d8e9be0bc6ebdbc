from datetime import date

import pytest

from services.search.applications.get_external_flights import (
    ExternalFlightQueryService,
)
from services.search.infrastructure.mock_flight_provider import MockFlightProvider
from services.shared.domain import ResourceNotFoundException


@pytest.fixture
def provider():
    return MockFlightProvider(today=date(2026, 5, 1))


class TestMockFlightProvider:
    def test_fetch_all_returns_fixed_flights(self, provider):
        flights = provider.fetch_all()

        assert len(flights) == 8
        assert str(flights[0].departure_time) == "2026-05-01T10:00:00"
        assert str(flights[0].arrival_time) == "2026-05-01T15:00:00"

    def test_fetch_by_number_is_case_insensitive(self, provider):
        assert [f.id for f in provider.fetch_by_number("ba501")] == ["5"]

    def test_fetch_by_route(self, provider):
        assert [f.flight_number for f in provider.fetch_by_route("syd", "LAX")] == [
            "QF801"
        ]
        assert provider.fetch_by_route("JFK", "SYD") == []

    @pytest.mark.parametrize("external_id, expected", [("DL205", "2"), ("7", "7")])
    def test_fetch_by_id_matches_number_then_id(self, provider, external_id, expected):
        assert provider.fetch_by_id(external_id).id == expected


class TestExternalFlightQueryService:
    def test_by_route_normalizes_codes(self, provider):
        service = ExternalFlightQueryService(provider)

        assert len(service.by_route(" jfk ", "lax")) == 1

    def test_unknown_external_flight(self, provider):
        service = ExternalFlightQueryService(provider)

        with pytest.raises(ResourceNotFoundException, match="External flight"):
            service.get("ZZ999")
