from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.passenger.applications.register_passenger import (
    RegisterPassengerService,
)
from services.passenger.domain.factory import PassengerDetails, PassengerFactory
from services.passenger.handlers.request_models import RegisterPassengerRequest
from services.passenger.handlers.response_models import to_passenger_data
from services.passenger.infrastructure.dynamodb_passenger_repository import (
    DynamoDBPassengerRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import handle_api_errors, ok, require_principal

logger = Logger()

uow = DynamoDBUnitOfWork()
service = RegisterPassengerService(
    uow=uow,
    repository=DynamoDBPassengerRepository(uow),
    factory=PassengerFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """乗客登録 Lambda Handler"""
    require_principal(event)
    request = RegisterPassengerRequest.model_validate_json(event.body or "{}")
    logger.info("Received register passenger request")

    details: PassengerDetails = {
        "first_name": request.first_name,
        "last_name": request.last_name,
        "email": request.email,
        "phone_number": request.phone_number,
        "date_of_birth": request.date_of_birth,
        "passport_number": request.passport_number,
        "nationality": request.nationality,
    }
    passenger = service.register(details)
    return ok(to_passenger_data(passenger), "Passenger created successfully", 201)
