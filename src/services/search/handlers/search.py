from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.applications.get_flights import FlightQueryService
from services.flight.handlers.request_models import SearchFlightsRequest
from services.flight.infrastructure.dynamodb_airport_repository import (
    DynamoDBAirportRepository,
)
from services.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from services.search.applications.search_unified import SearchUnifiedService
from services.search.handlers.request_models import SearchUnifiedQuery
from services.search.handlers.response_models import to_unified_flight_data
from services.search.infrastructure.provider_factory import (
    build_external_flight_provider,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import handle_api_errors, ok, require_principal

logger = Logger()

uow = DynamoDBUnitOfWork()
service = SearchUnifiedService(
    flight_query=FlightQueryService(repository=DynamoDBFlightRepository(uow)),
    airport_repository=DynamoDBAirportRepository(uow),
    provider=build_external_flight_provider(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """統合フライト検索 Lambda Handler

    POST /flights/search-unified?includeExternal=true
    """
    require_principal(event)
    request = SearchFlightsRequest.model_validate_json(event.body or "{}")
    query = SearchUnifiedQuery.model_validate(event.query_string_parameters or {})

    flights = service.search(
        request.departure_airport_code,
        request.arrival_airport_code,
        request.departure_date,
        include_external=query.include_external,
    )
    return ok(
        [to_unified_flight_data(f) for f in flights], "Flights retrieved successfully"
    )
