from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.applications.update_airport import UpdateAirportService
from services.flight.handlers.request_models import UpdateAirportRequest
from services.flight.handlers.response_models import to_airport_data
from services.flight.infrastructure.dynamodb_airport_repository import (
    DynamoDBAirportRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import Role, handle_api_errors, ok, require_role

logger = Logger()

uow = DynamoDBUnitOfWork()
service = UpdateAirportService(uow=uow, repository=DynamoDBAirportRepository(uow))


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """空港更新 Lambda Handler（ADMIN のみ）

    PUT /airports/{code}
    """
    principal = require_role(event, Role.ADMIN)
    code = (event.path_parameters or {}).get("code")
    if not code:
        raise ValueError("code is required")

    request = UpdateAirportRequest.model_validate_json(event.body or "{}")
    logger.info(
        "Received update airport request",
        extra={"code": code, "username": principal.username},
    )
    airport = service.update(
        code=code, name=request.name, city=request.city, country=request.country
    )
    return ok(to_airport_data(airport), "Airport updated successfully")
