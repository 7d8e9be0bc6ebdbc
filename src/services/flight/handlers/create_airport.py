from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.applications.create_airport import CreateAirportService
from services.flight.handlers.request_models import CreateAirportRequest
from services.flight.handlers.response_models import to_airport_data
from services.flight.infrastructure.dynamodb_airport_repository import (
    DynamoDBAirportRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import Role, handle_api_errors, ok, require_role

logger = Logger()

uow = DynamoDBUnitOfWork()
repository = DynamoDBAirportRepository(uow)
service = CreateAirportService(uow=uow, repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """空港登録 Lambda Handler（ADMIN のみ）"""
    principal = require_role(event, Role.ADMIN)
    request = CreateAirportRequest.model_validate_json(event.body or "{}")
    logger.info(
        "Received create airport request",
        extra={"code": request.code, "username": principal.username},
    )

    airport = service.create(
        code=request.code,
        name=request.name,
        city=request.city,
        country=request.country,
    )
    return ok(to_airport_data(airport), "Airport created successfully", 201)
