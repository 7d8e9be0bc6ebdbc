from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.payment.applications.process_payment import ProcessPaymentService
from services.payment.domain.factory import PaymentFactory
from services.payment.handlers.request_models import ProcessPaymentRequest
from services.payment.handlers.response_models import to_payment_data
from services.payment.infrastructure.dynamodb_payment_repository import (
    DynamoDBPaymentRepository,
)
from services.payment.infrastructure.simulated_payment_gateway import (
    SimulatedPaymentGateway,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import handle_api_errors, ok, require_principal

logger = Logger()

uow = DynamoDBUnitOfWork()
service = ProcessPaymentService(
    uow=uow,
    booking_repository=DynamoDBBookingRepository(uow),
    payment_repository=DynamoDBPaymentRepository(uow),
    gateway=SimulatedPaymentGateway(),
    factory=PaymentFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """決済処理 Lambda Handler (POST /payments)"""
    require_principal(event)
    request = ProcessPaymentRequest.model_validate_json(event.body or "{}")
    logger.info(
        "Received process payment request",
        extra={"booking_id": request.booking_id},
    )

    payment = service.process(request.booking_id, request.payment_method)
    return ok(to_payment_data(payment), "Payment processed successfully", 201)
