from datetime import datetime, timezone

import pytest

from services.booking.domain.value_object import BookingId
from services.review.domain.entity import Review
from services.review.domain.value_object import Rating, ReviewId
from services.shared.domain import HotelId, UserId


@pytest.fixture
def create_review():
    """Review を生成する Factory fixture"""

    def _factory(
        review_id: str = "review-1",
        hotel_id: str = "hotel-1",
        rating: int = 5,
        title: str | None = "Great stay",
    ) -> Review:
        return Review(
            id=ReviewId(value=review_id),
            booking_id=BookingId(value="booking-1"),
            user_id=UserId(value="user-1"),
            hotel_id=HotelId(value=hotel_id),
            rating=Rating(value=rating),
            created_at=datetime(2024, 7, 1, tzinfo=timezone.utc),
            title=title,
            comment="Friendly staff",
        )

    return _factory
