from datetime import datetime

from services.booking.domain.value_object import BookingId
from services.review.domain.value_object import Rating, ReviewDraft, ReviewId
from services.shared.domain import Entity, HotelId, UserId


class Review(Entity[ReviewId]):
    """レビューエンティティ"""

    def __init__(
        self,
        id: ReviewId,
        booking_id: BookingId,
        user_id: UserId,
        hotel_id: HotelId,
        rating: Rating,
        created_at: datetime,
        title: str | None = None,
        comment: str | None = None,
    ) -> None:
        super().__init__(id)
        self._booking_id = booking_id
        self._user_id = user_id
        self._hotel_id = hotel_id
        self._rating = rating
        self._created_at = created_at
        self._title = title
        self._comment = comment

    @classmethod
    def from_draft(
        cls, id: ReviewId, draft: ReviewDraft, created_at: datetime
    ) -> "Review":
        return cls(
            id=id,
            booking_id=draft.booking_id,
            user_id=draft.user_id,
            hotel_id=draft.hotel_id,
            rating=draft.rating,
            created_at=created_at,
            title=draft.title,
            comment=draft.comment,
        )

    @property
    def booking_id(self) -> BookingId:
        return self._booking_id

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def hotel_id(self) -> HotelId:
        return self._hotel_id

    @property
    def rating(self) -> Rating:
        return self._rating

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def comment(self) -> str | None:
        return self._comment
