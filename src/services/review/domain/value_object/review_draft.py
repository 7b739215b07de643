from dataclasses import dataclass

from services.booking.domain.value_object import BookingId
from services.review.domain.value_object.rating import Rating
from services.shared.domain import HotelId, UserId


@dataclass(frozen=True)
class ReviewDraft:
    """永続化前のレビュー（ID・作成日時は未採番）"""

    booking_id: BookingId
    user_id: UserId
    hotel_id: HotelId
    rating: Rating
    title: str | None = None
    comment: str | None = None
