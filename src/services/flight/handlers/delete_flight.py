from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.flight.applications.delete_flight import DeleteFlightService
from services.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import Role, handle_api_errors, ok, require_role

logger = Logger()

uow = DynamoDBUnitOfWork()
service = DeleteFlightService(
    uow=uow,
    flight_repository=DynamoDBFlightRepository(uow),
    booking_repository=DynamoDBBookingRepository(uow),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """フライト削除 Lambda Handler（ADMIN のみ）

    DELETE /flights/{flight_id}
    """
    require_role(event, Role.ADMIN)
    flight_id = (event.path_parameters or {}).get("flight_id")
    if not flight_id:
        raise ValueError("flight_id is required")

    service.delete(flight_id)
    return ok(None, "Flight deleted successfully")
