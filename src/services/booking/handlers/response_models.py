from __future__ import annotations

from datetime import date, datetime

from services.booking.domain.entity import Booking
from services.shared.utils.camel_case_model import CamelCaseModel


class SplitParticipantData(CamelCaseModel):
    """割り勘参加者のレスポンスモデル"""

    email: str
    amount: str
    paid: bool


class SplitPaymentData(CamelCaseModel):
    participants: list[SplitParticipantData]


class BookingData(CamelCaseModel):
    """予約データのレスポンスモデル"""

    id: str
    user_id: str
    hotel_id: str
    room_id: str
    check_in_date: date
    check_out_date: date
    total_amount: str
    currency: str
    payment_status: str
    payment_intent_id: str
    guest_count: int
    special_requests: str | None
    status: str
    is_split_payment: bool
    split_payment_data: SplitPaymentData | None
    created_at: datetime
    updated_at: datetime


class CreateBookingResponse(CamelCaseModel):
    """予約作成のレスポンスモデル"""

    booking: BookingData
    client_secret: str


def to_booking_data(booking: Booking) -> BookingData:
    """Booking エンティティをレスポンスモデルに変換する"""
    split_payment_data = booking.split_payment_data()
    return BookingData(
        id=str(booking.id),
        user_id=str(booking.user_id),
        hotel_id=str(booking.hotel_id),
        room_id=str(booking.room_id),
        check_in_date=booking.stay_period.check_in,
        check_out_date=booking.stay_period.check_out,
        total_amount=str(booking.total_amount.amount),
        currency=str(booking.total_amount.currency),
        payment_status=booking.payment_status.value,
        payment_intent_id=booking.payment_intent_id,
        guest_count=booking.guest_count,
        special_requests=booking.special_requests,
        status=booking.status.value,
        is_split_payment=booking.is_split_payment,
        split_payment_data=(
            SplitPaymentData.model_validate(split_payment_data)
            if split_payment_data is not None
            else None
        ),
        created_at=booking.created_at,
        updated_at=booking.updated_at,
    )


def to_booking_dict(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return to_booking_data(booking).to_json_dict()
