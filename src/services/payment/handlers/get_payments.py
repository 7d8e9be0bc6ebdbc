from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.payment.applications.get_payments import PaymentQueryService
from services.payment.handlers.response_models import to_payment_data
from services.payment.infrastructure.dynamodb_payment_repository import (
    DynamoDBPaymentRepository,
)
from services.shared.infrastructure import DynamoDBUnitOfWork
from services.shared.utils import handle_api_errors, ok, require_principal

logger = Logger()

uow = DynamoDBUnitOfWork()
service = PaymentQueryService(
    payment_repository=DynamoDBPaymentRepository(uow),
    booking_repository=DynamoDBBookingRepository(uow),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_api_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """決済参照 Lambda Handler

    - GET /payments
    - GET /payments/{payment_id}
    - GET /payments/transaction/{transaction_id}
    - GET /payments/booking/{booking_id}
    """
    require_principal(event)
    path_params = event.path_parameters or {}

    if path_params.get("payment_id"):
        payment = service.get(path_params["payment_id"])
    elif path_params.get("transaction_id"):
        payment = service.get_by_transaction_id(path_params["transaction_id"])
    elif path_params.get("booking_id"):
        payment = service.get_by_booking_id(path_params["booking_id"])
    else:
        payments = service.list_all()
        return ok(
            [to_payment_data(p) for p in payments], "Payments retrieved successfully"
        )

    return ok(to_payment_data(payment), "Payment retrieved successfully")
