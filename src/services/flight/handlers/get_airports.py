from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.applications.get_airports import AirportQueryService
from services.flight.handlers.response_models import to_airport_data
from services.flight.infrastructure.dynamodb_airport_repository import (
    DynamoDBAirportRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import handle_api_errors, ok, require_principal

logger = Logger()

repository = DynamoDBAirportRepository(DynamoDBUnitOfWork())
service = AirportQueryService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """空港参照 Lambda Handler

    - GET /airports?city=...
    - GET /airports/{code}
    """
    require_principal(event)
    path_params = event.path_parameters or {}

    code = path_params.get("code")
    if code:
        logger.info("Fetching airport", extra={"code": code})
        airport = service.get(code)
        return ok(to_airport_data(airport), "Airport retrieved successfully")

    city = (event.query_string_parameters or {}).get("city")
    airports = service.list_all(city=city)
    return ok(
        [to_airport_data(a) for a in airports], "Airports retrieved successfully"
    )
