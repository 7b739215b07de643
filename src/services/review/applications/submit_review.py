from typing import NotRequired, TypedDict

from aws_lambda_powertools import Logger

from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.review.domain.entity import Review
from services.review.domain.repository import ReviewRepository
from services.review.domain.value_object import Rating, ReviewDraft
from services.shared.domain import (
    AuthContext,
    BusinessRuleViolationException,
    HotelId,
)

logger = Logger(child=True)


class ReviewDetails(TypedDict):
    """レビュー投稿の入力データ"""

    booking_id: BookingId
    hotel_id: HotelId
    rating: int
    title: NotRequired[str | None]
    comment: NotRequired[str | None]


class SubmitReviewService:
    """レビュー投稿のユースケース

    本人の予約で、同じホテルかつ宿泊完了（completed）のものに限り投稿できる。
    """

    def __init__(
        self, bookings: BookingRepository, repository: ReviewRepository
    ) -> None:
        self._bookings = bookings
        self._repository = repository

    def submit(self, auth: AuthContext, details: ReviewDetails) -> Review:
        rating = Rating(value=details["rating"])

        booking = self._bookings.find_by_id_for_user(
            auth.user_id, details["booking_id"]
        )
        if booking is None or not booking.is_reviewable_for(details["hotel_id"]):
            raise BusinessRuleViolationException("Can only review completed bookings")

        review = self._repository.create(
            ReviewDraft(
                booking_id=details["booking_id"],
                user_id=auth.user_id,
                hotel_id=details["hotel_id"],
                rating=rating,
                title=details.get("title"),
                comment=details.get("comment"),
            )
        )
        logger.info(
            "Review submitted",
            extra={"review_id": str(review.id), "hotel_id": str(review.hotel_id)},
        )
        return review
