from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.payment.domain.gateway import PaymentGateway
from services.shared.domain import AuthContext, ResourceNotFoundException
from services.shared.domain.exception import PaymentNotCompleteException

logger = Logger(child=True)


class ConfirmPaymentService:
    """決済完了確認のユースケース

    決済代行サービスで決済完了を確認し、対応する予約を返す。
    予約の支払いステータスは更新しない（照会のみ）。
    """

    def __init__(self, gateway: PaymentGateway, repository: BookingRepository) -> None:
        self._gateway = gateway
        self._repository = repository

    def confirm(self, auth: AuthContext, payment_intent_id: str) -> Booking:
        """決済完了を確認する"""
        snapshot = self._gateway.retrieve_intent(payment_intent_id)
        if not snapshot.is_succeeded:
            logger.info(
                "Payment intent is not settled",
                extra={
                    "payment_intent_id": payment_intent_id,
                    "status": snapshot.status.value,
                },
            )
            raise PaymentNotCompleteException(snapshot.status.value)

        booking = self._repository.find_by_payment_intent_id(payment_intent_id)
        if booking is None or not booking.is_owned_by(auth.user_id):
            raise ResourceNotFoundException("booking")
        return booking
