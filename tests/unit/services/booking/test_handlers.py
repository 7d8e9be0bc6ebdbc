import json
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import BookingId, BookingReference
from services.booking.handlers import confirm, create, get_bookings
from services.flight.domain.value_object import FlightId, SeatId, SeatNumber
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import (
    Currency,
    IsoDateTime,
    Money,
    SeatUnavailableException,
)


@pytest.fixture
def booking():
    flight_id = FlightId("f-1")
    return Booking(
        id=BookingId("b-1"),
        reference=BookingReference("BK1A2B3C4D"),
        passenger_id=PassengerId("p-1"),
        flight_id=flight_id,
        seat_id=SeatId(flight_id, SeatNumber("1A")),
        total_price=Money(Decimal("800.00"), Currency("USD")),
        created_at=IsoDateTime.from_string("2026-05-01T09:00:00"),
    )


@pytest.fixture
def mock_service(monkeypatch):
    """Handler モジュールの service を差し替える Factory fixture"""

    def _factory(module) -> MagicMock:
        service = MagicMock()
        monkeypatch.setattr(module, "service", service)
        return service

    return _factory


CREATE_BODY = {"passengerId": "p-1", "flightId": "f-1", "seatId": "f-1:1A"}


class TestCreateBookingHandler:
    """POST /bookings"""

    def test_created(self, api_event, lambda_context, mock_service, booking):
        # Arrange
        service = mock_service(create)
        service.create.return_value = booking

        # Act
        response = create.lambda_handler(api_event(body=CREATE_BODY), lambda_context)

        # Assert
        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["success"] is True
        assert body["message"] == "Booking created successfully"
        assert body["data"]["booking_reference"] == "BK1A2B3C4D"
        assert body["data"]["seat_number"] == "1A"
        assert body["data"]["total_price"] == "800.00"
        assert body["data"]["status"] == "PENDING"
        service.create.assert_called_once_with(
            passenger_id="p-1", flight_id="f-1", seat_id="f-1:1A"
        )

    def test_unauthenticated(self, api_event, lambda_context, mock_service):
        service = mock_service(create)

        response = create.lambda_handler(
            api_event(body=CREATE_BODY, role=None), lambda_context
        )

        assert response["statusCode"] == 401
        service.create.assert_not_called()

    def test_validation_error(self, api_event, lambda_context, mock_service):
        mock_service(create)

        response = create.lambda_handler(
            api_event(body={"passengerId": "p-1", "flightId": "f-1"}), lambda_context
        )

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["message"] == "Validation failed"
        assert body["errors"][0]["field"] == "seatId"

    def test_seat_unavailable(self, api_event, lambda_context, mock_service):
        service = mock_service(create)
        service.create.side_effect = SeatUnavailableException("1A")

        response = create.lambda_handler(api_event(body=CREATE_BODY), lambda_context)

        assert response["statusCode"] == 409
        assert json.loads(response["body"])["message"] == "Seat 1A is not available"


class TestConfirmBookingHandler:
    def test_missing_path_parameter(self, api_event, lambda_context, mock_service):
        mock_service(confirm)

        response = confirm.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 400

    def test_confirmed(self, api_event, lambda_context, mock_service, booking):
        service = mock_service(confirm)
        service.confirm.return_value = booking

        response = confirm.lambda_handler(
            api_event(path_parameters={"booking_id": "b-1"}), lambda_context
        )

        assert response["statusCode"] == 200
        service.confirm.assert_called_once_with("b-1")


class TestGetBookingsHandler:
    def test_list_by_status(self, api_event, lambda_context, mock_service, booking):
        service = mock_service(get_bookings)
        service.list_all.return_value = [booking]

        response = get_bookings.lambda_handler(
            api_event(query={"status": "PENDING"}), lambda_context
        )

        assert response["statusCode"] == 200
        assert len(json.loads(response["body"])["data"]) == 1
        assert service.list_all.call_args.kwargs["status"].value == "PENDING"

    def test_unknown_status_is_rejected(self, api_event, lambda_context, mock_service):
        mock_service(get_bookings)

        response = get_bookings.lambda_handler(
            api_event(query={"status": "LOST"}), lambda_context
        )

        assert response["statusCode"] == 400

    def test_unexpected_error_is_not_leaked(
        self, api_event, lambda_context, mock_service
    ):
        service = mock_service(get_bookings)
        service.get.side_effect = RuntimeError("table scan exploded")

        response = get_bookings.lambda_handler(
            api_event(path_parameters={"booking_id": "b-1"}), lambda_context
        )

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["message"] == "Internal server error"
