from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.get_bookings import BookingQueryService
from services.booking.handlers.request_models import ListBookingsQuery
from services.booking.handlers.response_models import to_booking_data
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.passenger.infrastructure.dynamodb_passenger_repository import (
    DynamoDBPassengerRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import handle_api_errors, ok, require_principal

logger = Logger()

uow = DynamoDBUnitOfWork()
service = BookingQueryService(
    booking_repository=DynamoDBBookingRepository(uow),
    passenger_repository=DynamoDBPassengerRepository(uow),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約参照 Lambda Handler

    - GET /bookings?status=PENDING
    - GET /bookings/{booking_id}
    - GET /bookings/reference/{booking_reference}
    - GET /passengers/{passenger_id}/bookings
    """
    require_principal(event)
    path_params = event.path_parameters or {}

    if path_params.get("booking_id"):
        booking = service.get(path_params["booking_id"])
        return ok(to_booking_data(booking), "Booking retrieved successfully")

    if path_params.get("booking_reference"):
        booking = service.get_by_reference(path_params["booking_reference"])
        return ok(to_booking_data(booking), "Booking retrieved successfully")

    if path_params.get("passenger_id"):
        bookings = service.list_by_passenger(path_params["passenger_id"])
    else:
        query = ListBookingsQuery.model_validate(event.query_string_parameters or {})
        bookings = service.list_all(status=query.status)

    return ok(
        [to_booking_data(b) for b in bookings], "Bookings retrieved successfully"
    )
