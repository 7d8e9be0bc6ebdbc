from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.passenger.applications.delete_passenger import DeletePassengerService
from services.passenger.infrastructure.dynamodb_passenger_repository import (
    DynamoDBPassengerRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import handle_api_errors, ok, require_principal

logger = Logger()

uow = DynamoDBUnitOfWork()
service = DeletePassengerService(
    uow=uow,
    passenger_repository=DynamoDBPassengerRepository(uow),
    booking_repository=DynamoDBBookingRepository(uow),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """乗客削除 Lambda Handler

    DELETE /passengers/{passenger_id}
    """
    require_principal(event)
    passenger_id = (event.path_parameters or {}).get("passenger_id")
    if not passenger_id:
        raise ValueError("passenger_id is required")

    service.delete(passenger_id)
    return ok(None, "Passenger deleted successfully")
