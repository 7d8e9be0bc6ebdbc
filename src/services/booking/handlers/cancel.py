from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.handlers.response_models import to_booking_data
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.flight.applications.seat_allocation import SeatAllocationService
from services.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import handle_api_errors, ok, require_principal

logger = Logger()

uow = DynamoDBUnitOfWork()
service = CancelBookingService(
    uow=uow,
    booking_repository=DynamoDBBookingRepository(uow),
    seat_allocation=SeatAllocationService(DynamoDBFlightRepository(uow)),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler (PUT /bookings/{booking_id}/cancel)"""
    require_principal(event)
    booking_id = (event.path_parameters or {}).get("booking_id")
    if not booking_id:
        raise ValueError("booking_id is required")

    logger.append_keys(booking_id=booking_id)
    booking = service.cancel(booking_id)
    return ok(to_booking_data(booking), "Booking cancelled successfully")
