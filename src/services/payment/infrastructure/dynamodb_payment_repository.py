import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Key

from services.booking.domain.value_object import BookingId, BookingReference
from services.payment.domain.entity import Payment
from services.payment.domain.enum import PaymentMethod, PaymentStatus
from services.payment.domain.repository import PaymentRepository
from services.payment.domain.value_object import PaymentId, TransactionId
from services.shared.domain import Currency, IsoDateTime, Money
from services.shared.domain.exception import (
    DuplicateResourceException,
    InvalidBookingException,
)
from services.shared.infrastructure import DynamoDBUnitOfWork, query_all


class DynamoDBPaymentRepository(PaymentRepository):
    """DynamoDBを使用したPaymentRepository の具象実装

    決済は予約アイテムと同じパーティション（BOOKING#<予約ID> / PAYMENT）に置き、
    予約1件につき1件であることをキーで保証する。
    """

    def __init__(self, uow: DynamoDBUnitOfWork, table_name: str | None = None) -> None:
        self._uow = uow
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, payment: Payment) -> None:
        """決済の作成をステージする"""
        item = {
            "PK": f"BOOKING#{payment.booking_id}",
            "SK": "PAYMENT",
            "entity_type": "PAYMENT",
            "payment_id": str(payment.id),
            "booking_id": str(payment.booking_id),
            "booking_reference": str(payment.booking_reference),
            "transaction_id": str(payment.transaction_id),
            "amount": str(payment.amount.amount),
            "currency": str(payment.amount.currency),
            "payment_method": payment.method.value,
            "status": payment.status.value,
            "payment_date": str(payment.payment_date),
            "GSI1PK": "PAYMENTS",
            "GSI1SK": str(payment.payment_date),
        }
        self._uow.stage_put(
            item,
            on_conflict=InvalidBookingException(
                "Payment already processed for this booking"
            ),
        )
        self._uow.stage_put(
            {
                "PK": f"PAYMENT_TXN#{payment.transaction_id}",
                "SK": "UNIQUE",
                "entity_type": "PAYMENT_TXN",
                "booking_id": str(payment.booking_id),
            },
            on_conflict=DuplicateResourceException.of(
                "Payment", "transactionId", payment.transaction_id
            ),
        )

    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        """決済IDで検索"""
        return self.find_by_booking_id(payment_id.booking_id)

    def find_by_booking_id(self, booking_id: BookingId) -> Payment | None:
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_id}", "SK": "PAYMENT"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_transaction_id(self, transaction_id: TransactionId) -> Payment | None:
        response = self.table.get_item(
            Key={"PK": f"PAYMENT_TXN#{transaction_id}", "SK": "UNIQUE"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self.find_by_booking_id(BookingId(item["booking_id"]))

    def find_all(self) -> list[Payment]:
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("PAYMENTS"),
        )
        return [self._to_entity(item) for item in items]

    def _to_entity(self, item: dict) -> Payment:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Payment(
            id=PaymentId(value=item["payment_id"]),
            booking_id=BookingId(item["booking_id"]),
            booking_reference=BookingReference(item["booking_reference"]),
            transaction_id=TransactionId(item["transaction_id"]),
            amount=Money(
                amount=Decimal(item["amount"]),
                currency=Currency(item["currency"]),
            ),
            method=PaymentMethod(item["payment_method"]),
            payment_date=IsoDateTime.from_string(item["payment_date"]),
            status=PaymentStatus(item["status"]),
        )
