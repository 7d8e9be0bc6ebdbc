from aws_lambda_powertools import Logger

from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.payment.domain.entity import Payment
from services.payment.domain.enum import PaymentMethod
from services.payment.domain.factory import PaymentFactory
from services.payment.domain.gateway import PaymentGateway
from services.payment.domain.repository import PaymentRepository
from services.shared.domain import (
    InvalidBookingException,
    PaymentFailedException,
    ResourceNotFoundException,
    UnitOfWork,
)

logger = Logger(child=True)


class ProcessPaymentService:
    """決済処理ユースケース

    ゲートウェイが承認した場合のみ、決済（SUCCESS）と予約の確定を
    1つの UnitOfWork で書き込む。拒否された場合は何も永続化せず、
    予約は PENDING のまま残る。
    """

    def __init__(
        self,
        uow: UnitOfWork,
        booking_repository: BookingRepository,
        payment_repository: PaymentRepository,
        gateway: PaymentGateway,
        factory: PaymentFactory,
    ) -> None:
        self._uow = uow
        self._booking_repository = booking_repository
        self._payment_repository = payment_repository
        self._gateway = gateway
        self._factory = factory

    def process(self, booking_id: str, method: PaymentMethod) -> Payment:
        """決済を処理する"""
        with self._uow:
            booking = self._booking_repository.find_by_id(BookingId(booking_id))
            if booking is None:
                raise ResourceNotFoundException.of("Booking", booking_id)

            if booking.status != BookingStatus.PENDING:
                raise InvalidBookingException(
                    "Cannot process payment for booking with status: "
                    f"{booking.status.value}"
                )

            if self._payment_repository.find_by_booking_id(booking.id) is not None:
                raise InvalidBookingException(
                    "Payment already processed for this booking"
                )

            payment = self._factory.create(booking, method)

            if not self._gateway.charge(payment):
                payment.fail()
                logger.warning(
                    "Payment declined",
                    extra={
                        "booking_id": booking_id,
                        "transaction_id": str(payment.transaction_id),
                    },
                )
                raise PaymentFailedException("Payment processing failed")

            payment.succeed()
            booking.confirm()
            self._payment_repository.save(payment)
            self._booking_repository.update(
                booking, expected_status=BookingStatus.PENDING
            )
            self._uow.commit()

        logger.info(
            "Payment processed",
            extra={
                "booking_id": booking_id,
                "transaction_id": str(payment.transaction_id),
            },
        )
        return payment
