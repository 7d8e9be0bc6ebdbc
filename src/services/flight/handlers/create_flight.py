from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.applications.create_flight import CreateFlightService
from services.flight.domain.factory import FlightDetails, FlightFactory
from services.flight.handlers.request_models import CreateFlightRequest
from services.flight.handlers.response_models import to_flight_data
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
service = CreateFlightService(
    uow=uow,
    flight_repository=DynamoDBFlightRepository(uow),
    airport_repository=DynamoDBAirportRepository(uow),
    factory=FlightFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """フライト登録 Lambda Handler（ADMIN のみ）"""
    require_role(event, Role.ADMIN)
    request = CreateFlightRequest.model_validate_json(event.body or "{}")
    logger.info(
        "Received create flight request",
        extra={"flight_number": request.flight_number},
    )

    flight = service.create(_to_flight_details(request))
    return ok(to_flight_data(flight), "Flight created successfully", 201)


def _to_flight_details(request: CreateFlightRequest) -> FlightDetails:
    """リクエストボディから FlightDetails を構築する"""
    return {
        "flight_number": request.flight_number,
        "airline_name": request.airline_name,
        "departure_airport": request.departure_airport_code,
        "arrival_airport": request.arrival_airport_code,
        "departure_time": request.departure_time,
        "arrival_time": request.arrival_time,
        "total_seats": request.total_seats,
        "base_price": request.base_price,
        "currency": request.currency,
    }
