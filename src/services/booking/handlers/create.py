from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.create_booking import CreateBookingService
from services.booking.domain.factory import BookingFactory
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import to_booking_data
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.flight.applications.seat_allocation import SeatAllocationService
from services.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from services.passenger.infrastructure.dynamodb_passenger_repository import (
    DynamoDBPassengerRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import handle_api_errors, ok, require_principal

logger = Logger()

uow = DynamoDBUnitOfWork()
flight_repository = DynamoDBFlightRepository(uow)
service = CreateBookingService(
    uow=uow,
    passenger_repository=DynamoDBPassengerRepository(uow),
    flight_repository=flight_repository,
    booking_repository=DynamoDBBookingRepository(uow),
    seat_allocation=SeatAllocationService(flight_repository),
    factory=BookingFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler (POST /bookings)"""
    principal = require_principal(event)
    request = CreateBookingRequest.model_validate_json(event.body or "{}")
    logger.info(
        "Received create booking request",
        extra={
            "username": principal.username,
            "flight_id": request.flight_id,
            "seat_id": request.seat_id,
        },
    )

    booking = service.create(
        passenger_id=request.passenger_id,
        flight_id=request.flight_id,
        seat_id=request.seat_id,
    )
    return ok(to_booking_data(booking), "Booking created successfully", 201)
