from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.applications.get_flights import FlightQueryService
from services.flight.handlers.request_models import (
    ListFlightsQuery,
    SearchFlightsRequest,
)
from services.flight.handlers.response_models import to_flight_data
from services.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import handle_api_errors, ok, require_principal

logger = Logger()

repository = DynamoDBFlightRepository(DynamoDBUnitOfWork())
service = FlightQueryService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """フライト参照 Lambda Handler

    - GET /flights?status=...
    - GET /flights/{flight_id}
    - GET /flights/number/{flight_number}
    - POST /flights/search
    """
    require_principal(event)
    path_params = event.path_parameters or {}

    if event.resource == "/flights/search":
        request = SearchFlightsRequest.model_validate_json(event.body or "{}")
        logger.info("Searching flights", extra=request.model_dump(mode="json"))
        flights = service.search(
            request.departure_airport_code,
            request.arrival_airport_code,
            request.departure_date,
        )
        return ok(
            [to_flight_data(f) for f in flights], "Flights retrieved successfully"
        )

    if path_params.get("flight_id"):
        flight = service.get(path_params["flight_id"])
        return ok(to_flight_data(flight), "Flight retrieved successfully")

    if path_params.get("flight_number"):
        flight = service.get_by_number(path_params["flight_number"])
        return ok(to_flight_data(flight), "Flight retrieved successfully")

    query = ListFlightsQuery.model_validate(event.query_string_parameters or {})
    flights = service.list_all(status=query.status)
    return ok([to_flight_data(f) for f in flights], "Flights retrieved successfully")
