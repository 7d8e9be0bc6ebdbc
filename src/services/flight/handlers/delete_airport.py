from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.applications.delete_airport import DeleteAirportService
from services.flight.infrastructure.dynamodb_airport_repository import (
    DynamoDBAirportRepository,
)
from services.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import Role, handle_api_errors, ok, require_role

logger = Logger()

uow = DynamoDBUnitOfWork()
service = DeleteAirportService(
    uow=uow,
    airport_repository=DynamoDBAirportRepository(uow),
    flight_repository=DynamoDBFlightRepository(uow),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """空港削除 Lambda Handler（ADMIN のみ）

    DELETE /airports/{code}
    """
    principal = require_role(event, Role.ADMIN)
    code = (event.path_parameters or {}).get("code")
    if not code:
        raise ValueError("code is required")

    logger.info(
        "Received delete airport request",
        extra={"code": code, "username": principal.username},
    )
    service.delete(code)
    return ok(None, "Airport deleted successfully")
