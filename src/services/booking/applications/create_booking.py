from dataclasses import dataclass
from datetime import date
from typing import NotRequired, TypedDict

from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import compute_price
from services.booking.domain.value_object import (
    BookingDraft,
    SplitParticipant,
    StayPeriod,
)
from services.catalog.domain.repository import CatalogRepository
from services.payment.domain.gateway import PaymentGateway
from services.shared.domain import (
    AuthContext,
    Currency,
    HotelId,
    ResourceNotFoundException,
    RoomId,
    ValidationException,
)
from services.shared.domain.exception import InvalidRangeException

logger = Logger(child=True)


class BookingDetails(TypedDict):
    """予約作成の入力データ"""

    hotel_id: HotelId
    room_id: RoomId
    check_in_date: date
    check_out_date: date
    guest_count: int
    special_requests: NotRequired[str | None]
    is_split_payment: NotRequired[bool]
    split_emails: NotRequired[list[str]]


@dataclass(frozen=True)
class CreateBookingResult:
    """予約作成の結果（クライアントが決済に使う secret を含む）"""

    booking: Booking
    client_secret: str


class CreateBookingService:
    """予約作成のユースケース

    客室参照 → 料金計算 → PaymentIntent 作成 → 予約保存 の順に1回ずつ実行する。
    PaymentIntent 作成後に保存が失敗した場合、PaymentIntent は残ったままになる
    （補償処理は行わない）。
    """

    def __init__(
        self,
        catalog: CatalogRepository,
        gateway: PaymentGateway,
        repository: BookingRepository,
        currency: Currency,
    ) -> None:
        self._catalog = catalog
        self._gateway = gateway
        self._repository = repository
        self._currency = currency

    def create(self, auth: AuthContext, details: BookingDetails) -> CreateBookingResult:
        """予約を作成する"""
        room = self._catalog.find_room(details["room_id"])
        if room is None or room.hotel_id != details["hotel_id"]:
            raise ResourceNotFoundException("room")

        guest_count = details["guest_count"]
        if not room.can_accommodate(guest_count):
            raise ValidationException(
                "capacity",
                f"Guest count {guest_count} exceeds room capacity {room.capacity}",
            )

        is_split_payment = details.get("is_split_payment", False)
        emails = (
            _participant_emails(details.get("split_emails", []))
            if is_split_payment
            else []
        )

        try:
            price = compute_price(
                room.price_per_night,
                details["check_in_date"],
                details["check_out_date"],
                participant_count=len(emails),
                currency=self._currency,
            )
        except InvalidRangeException as e:
            raise ValidationException("dates", str(e)) from e

        intent = self._gateway.create_intent(
            amount_minor_units=price.total.to_minor_units(),
            currency=str(self._currency),
            metadata={
                "hotelId": str(details["hotel_id"]),
                "roomId": str(details["room_id"]),
                "userId": str(auth.user_id),
                "checkInDate": details["check_in_date"].isoformat(),
                "checkOutDate": details["check_out_date"].isoformat(),
                "guestCount": str(guest_count),
                "isSplitPayment": "true" if is_split_payment else "false",
            },
        )

        participants = tuple(
            SplitParticipant(email=email, amount=price.per_participant_share)
            for email in emails
            if price.per_participant_share is not None
        )
        draft = BookingDraft(
            user_id=auth.user_id,
            hotel_id=details["hotel_id"],
            room_id=details["room_id"],
            stay_period=StayPeriod(
                check_in=details["check_in_date"],
                check_out=details["check_out_date"],
            ),
            guest_count=guest_count,
            total_amount=price.total,
            payment_intent_id=intent.intent_id,
            special_requests=details.get("special_requests"),
            is_split_payment=is_split_payment,
            split_participants=participants,
        )

        try:
            booking = self._repository.create(draft)
        except Exception:
            logger.error(
                "Booking was not persisted; payment intent is orphaned",
                extra={"payment_intent_id": intent.intent_id},
            )
            raise

        logger.info(
            "Booking created",
            extra={
                "booking_id": str(booking.id),
                "payment_intent_id": intent.intent_id,
                "total_amount": str(booking.total_amount),
            },
        )
        return CreateBookingResult(booking=booking, client_secret=intent.client_secret)


def _participant_emails(split_emails: list[str]) -> list[str]:
    """空欄を除き、前後の空白を取り除いた割り勘参加者のメールアドレス"""
    return [email.strip() for email in split_emails if email and email.strip()]
