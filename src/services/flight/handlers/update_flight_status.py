from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.applications.update_flight_status import (
    UpdateFlightStatusService,
)
from services.flight.handlers.request_models import UpdateFlightStatusRequest
from services.flight.handlers.response_models import to_flight_data
from services.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import Role, handle_api_errors, ok, require_role

logger = Logger()

uow = DynamoDBUnitOfWork()
service = UpdateFlightStatusService(uow=uow, repository=DynamoDBFlightRepository(uow))


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """運航ステータス更新 Lambda Handler（ADMIN のみ）

    PATCH /flights/{flight_id}/status
    """
    require_role(event, Role.ADMIN)
    flight_id = (event.path_parameters or {}).get("flight_id")
    if not flight_id:
        raise ValueError("flight_id is required")

    request = UpdateFlightStatusRequest.model_validate_json(event.body or "{}")
    flight = service.update(flight_id, request.status)
    return ok(to_flight_data(flight), "Flight status updated successfully")
