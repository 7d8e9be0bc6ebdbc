from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.applications.get_flights import FlightQueryService
from services.flight.handlers.request_models import ListSeatsQuery
from services.flight.handlers.response_models import to_seat_data
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
    """座席参照 Lambda Handler

    - GET /flights/{flight_id}/seats?available=true
    - GET /seats/{seat_id}
    """
    require_principal(event)
    path_params = event.path_parameters or {}

    seat_id = path_params.get("seat_id")
    if seat_id:
        seat = service.get_seat(seat_id)
        return ok(to_seat_data(seat), "Seat retrieved successfully")

    flight_id = path_params.get("flight_id")
    if not flight_id:
        raise ValueError("flight_id is required")

    query = ListSeatsQuery.model_validate(event.query_string_parameters or {})
    seats = service.list_seats(flight_id, available_only=query.available)
    return ok([to_seat_data(s) for s in seats], "Seats retrieved successfully")
