from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.applications.import_external_flight import (
    ImportExternalFlightService,
)
from services.flight.domain.factory import FlightFactory
from services.flight.handlers.request_models import ImportExternalFlightRequest
from services.flight.handlers.response_models import to_flight_data
from services.flight.infrastructure.dynamodb_airport_repository import (
    DynamoDBAirportRepository,
)
from services.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from services.search.infrastructure.provider_factory import (
    build_external_flight_provider,
)
from services.shared.domain import ResourceNotFoundException
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import Role, handle_api_errors, ok, require_role

logger = Logger()

uow = DynamoDBUnitOfWork()
provider = build_external_flight_provider()
service = ImportExternalFlightService(
    uow=uow,
    flight_repository=DynamoDBFlightRepository(uow),
    airport_repository=DynamoDBAirportRepository(uow),
    factory=FlightFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """外部フライト取り込み Lambda Handler（ADMIN のみ）

    POST /flights/import-from-external
    """
    require_role(event, Role.ADMIN)
    request = ImportExternalFlightRequest.model_validate_json(event.body or "{}")

    if request.external_flight is not None:
        external = request.external_flight.to_domain()
    else:
        external_id = request.external_flight_id.strip()
        external = provider.fetch_by_id(external_id)
        if external is None:
            raise ResourceNotFoundException.of("External flight", external_id)

    logger.info("Importing external flight", extra={"external_id": external.id})
    flight = service.import_flight(external)
    return ok(to_flight_data(flight), "External flight imported successfully", 201)
