import json
from unittest.mock import MagicMock

from services.payment.domain.enum import PaymentMethod
from services.payment.handlers import process
from services.shared.domain import PaymentFailedException


class TestProcessPaymentHandler:
    """POST /payments"""

    def test_declined_payment_returns_402(self, api_event, lambda_context, monkeypatch):
        service = MagicMock()
        service.process.side_effect = PaymentFailedException(
            "Payment processing failed"
        )
        monkeypatch.setattr(process, "service", service)

        response = process.lambda_handler(
            api_event(body={"bookingId": "b-1", "paymentMethod": "CREDIT_CARD"}),
            lambda_context,
        )

        assert response["statusCode"] == 402
        assert json.loads(response["body"])["message"] == "Payment processing failed"
        service.process.assert_called_once_with("b-1", PaymentMethod.CREDIT_CARD)

    def test_unknown_payment_method(self, api_event, lambda_context, monkeypatch):
        service = MagicMock()
        monkeypatch.setattr(process, "service", service)

        response = process.lambda_handler(
            api_event(body={"bookingId": "b-1", "paymentMethod": "CASH"}),
            lambda_context,
        )

        assert response["statusCode"] == 400
        service.process.assert_not_called()
