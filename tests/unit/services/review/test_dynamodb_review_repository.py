from unittest.mock import MagicMock

import pytest

from services.booking.domain.value_object import BookingId
from services.review.domain.value_object import Rating, ReviewDraft
from services.review.infrastructure.dynamodb_review_repository import (
    DynamoDBReviewRepository,
)
from services.shared.domain import HotelId, UserId


@pytest.fixture
def table():
    return MagicMock()


@pytest.fixture
def repository(table):
    return DynamoDBReviewRepository(table=table)


class TestDynamoDBReviewRepository:
    def test_create_and_read_back_by_hotel(self, repository, table):
        review = repository.create(
            ReviewDraft(
                booking_id=BookingId(value="booking-1"),
                user_id=UserId(value="user-1"),
                hotel_id=HotelId(value="hotel-1"),
                rating=Rating(value=5),
                title="Great",
            )
        )
        item = table.put_item.call_args.kwargs["Item"]
        assert item["PK"] == "USER#user-1"
        assert item["SK"] == f"REVIEW#{review.id}"
        assert item["GSI1PK"] == "HOTEL#hotel-1#REVIEWS"
        assert item["rating"] == 5

        table.query.return_value = {"Items": [item]}
        reviews = repository.find_by_hotel(HotelId(value="hotel-1"))

        assert reviews == [review]
        assert reviews[0].title == "Great"
        assert reviews[0].comment is None
        assert table.query.call_args.kwargs["IndexName"] == "GSI1"

    def test_find_by_user_queries_user_partition(self, repository, table):
        table.query.return_value = {"Items": []}

        assert repository.find_by_user(UserId(value="user-1")) == []
        assert "IndexName" not in table.query.call_args.kwargs
