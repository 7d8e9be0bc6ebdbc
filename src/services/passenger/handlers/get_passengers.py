from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.passenger.applications.get_passengers import PassengerQueryService
from services.passenger.handlers.response_models import to_passenger_data
from services.passenger.infrastructure.dynamodb_passenger_repository import (
    DynamoDBPassengerRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import handle_api_errors, ok, require_principal

logger = Logger()

repository = DynamoDBPassengerRepository(DynamoDBUnitOfWork())
service = PassengerQueryService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """乗客参照 Lambda Handler

    - GET /passengers
    - GET /passengers/{passenger_id}
    - GET /passengers/email/{email}
    """
    require_principal(event)
    path_params = event.path_parameters or {}

    if path_params.get("passenger_id"):
        passenger = service.get(path_params["passenger_id"])
        return ok(to_passenger_data(passenger), "Passenger retrieved successfully")

    if path_params.get("email"):
        passenger = service.get_by_email(path_params["email"])
        return ok(to_passenger_data(passenger), "Passenger retrieved successfully")

    passengers = service.list_all()
    return ok(
        [to_passenger_data(p) for p in passengers],
        "Passengers retrieved successfully",
    )
