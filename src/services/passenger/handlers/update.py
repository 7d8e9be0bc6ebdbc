from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.passenger.applications.update_passenger import UpdatePassengerService
from services.passenger.domain.factory import PassengerDetails, PassengerFactory
from services.passenger.handlers.request_models import UpdatePassengerRequest
from services.passenger.handlers.response_models import to_passenger_data
from services.passenger.infrastructure.dynamodb_passenger_repository import (
    DynamoDBPassengerRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import handle_api_errors, ok, require_principal

logger = Logger()

uow = DynamoDBUnitOfWork()
service = UpdatePassengerService(
    uow=uow,
    repository=DynamoDBPassengerRepository(uow),
    factory=PassengerFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """乗客更新 Lambda Handler

    PUT /passengers/{passenger_id}
    """
    require_principal(event)
    passenger_id = (event.path_parameters or {}).get("passenger_id")
    if not passenger_id:
        raise ValueError("passenger_id is required")

    request = UpdatePassengerRequest.model_validate_json(event.body or "{}")
    logger.info(
        "Received update passenger request", extra={"passenger_id": passenger_id}
    )

    details: PassengerDetails = {
        "first_name": request.first_name,
        "last_name": request.last_name,
        "email": request.email,
        "phone_number": request.phone_number,
        "date_of_birth": request.date_of_birth,
        "passport_number": request.passport_number,
        "nationality": request.nationality,
    }
    passenger = service.update(passenger_id, details)
    return ok(to_passenger_data(passenger), "Passenger updated successfully")
