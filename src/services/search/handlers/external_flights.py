from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.search.applications.get_external_flights import (
    ExternalFlightQueryService,
)
from services.search.handlers.request_models import ExternalFlightsQuery
from services.search.handlers.response_models import to_external_flight_data
from services.search.infrastructure.provider_factory import (
    build_external_flight_provider,
)
from services.shared.utils import handle_api_errors, ok, require_principal

logger = Logger()

service = ExternalFlightQueryService(provider=build_external_flight_provider())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """外部フライト参照 Lambda Handler

    - GET /flights/external?origin=JFK&destination=LAX
    - GET /flights/external/number/{flight_number}
    - GET /flights/external/{external_id}
    """
    require_principal(event)
    path_params = event.path_parameters or {}

    if path_params.get("flight_number"):
        number = path_params["flight_number"]
        flights = service.by_number(number)
        return ok(
            [to_external_flight_data(f) for f in flights],
            f"External flights for {number} retrieved successfully",
        )

    if path_params.get("external_id"):
        flight = service.get(path_params["external_id"])
        return ok(
            to_external_flight_data(flight), "External flight retrieved successfully"
        )

    query = ExternalFlightsQuery.model_validate(event.query_string_parameters or {})
    if query.origin is not None and query.destination is not None:
        flights = service.by_route(query.origin, query.destination)
    else:
        flights = service.list_all()
    return ok(
        [to_external_flight_data(f) for f in flights],
        "External flights retrieved successfully",
    )
