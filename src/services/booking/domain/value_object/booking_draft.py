from dataclasses import dataclass, field

from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.value_object.split_participant import SplitParticipant
from services.booking.domain.value_object.stay_period import StayPeriod
from services.shared.domain import HotelId, Money, RoomId, UserId


@dataclass(frozen=True)
class BookingDraft:
    """永続化前の予約（ID・作成日時は未採番）"""

    user_id: UserId
    hotel_id: HotelId
    room_id: RoomId
    stay_period: StayPeriod
    guest_count: int
    total_amount: Money
    payment_intent_id: str
    payment_status: PaymentStatus = PaymentStatus.PENDING
    status: BookingStatus = BookingStatus.CONFIRMED
    special_requests: str | None = None
    is_split_payment: bool = False
    split_participants: tuple[SplitParticipant, ...] = field(default_factory=tuple)
