import json

import pytest
from pydantic import BaseModel, Field

from services.shared.domain import (
    DuplicateResourceException,
    InvalidBookingException,
    OptimisticLockException,
    PaymentFailedException,
    ResourceNotFoundException,
    SeatUnavailableException,
)
from services.shared.domain.exception import (
    ForbiddenException,
    UnauthenticatedException,
)
from services.shared.utils import handle_api_errors


class _Body(BaseModel):
    name: str = Field(..., min_length=1)


def _call_raising(exc: BaseException) -> dict:
    @handle_api_errors
    def handler(event, context):
        raise exc

    return handler({}, None)


class TestHandleApiErrors:
    """例外 → HTTP ステータスの変換"""

    @pytest.mark.parametrize(
        ("exc", "status_code"),
        [
            (ResourceNotFoundException.of("Flight", "f1"), 404),
            (DuplicateResourceException.of("Flight", "flightNumber", "AA1"), 409),
            (InvalidBookingException("No seats available on this flight"), 400),
            (SeatUnavailableException("12C"), 409),
            (OptimisticLockException("conflict"), 409),
            (PaymentFailedException("Payment processing failed"), 402),
            (UnauthenticatedException("Authentication required"), 401),
            (ForbiddenException("Role ADMIN is required"), 403),
            (ValueError("Invalid seat number: ZZ"), 400),
        ],
    )
    def test_domain_errors_map_to_status(self, exc, status_code):
        response = _call_raising(exc)

        body = json.loads(response["body"])
        assert response["statusCode"] == status_code
        assert body["success"] is False
        assert body["message"] == str(exc)

    def test_validation_error_returns_field_details(self):
        @handle_api_errors
        def handler(event, context):
            _Body.model_validate({"name": ""})

        response = handler({}, None)

        body = json.loads(response["body"])
        assert response["statusCode"] == 400
        assert body["message"] == "Validation failed"
        assert body["errors"][0]["field"] == "name"

    def test_unexpected_error_is_not_leaked(self):
        response = _call_raising(RuntimeError("connection reset by peer"))

        body = json.loads(response["body"])
        assert response["statusCode"] == 500
        assert body["message"] == "Internal server error"
        assert "connection reset" not in response["body"]

    def test_seat_unavailable_message_names_the_seat(self):
        response = _call_raising(SeatUnavailableException("12C"))

        assert json.loads(response["body"])["message"] == "Seat 12C is not available"
