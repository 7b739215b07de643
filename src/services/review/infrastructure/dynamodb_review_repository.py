import os
from datetime import datetime

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.booking.domain.value_object import BookingId
from services.review.domain.entity import Review
from services.review.domain.factory import ReviewFactory
from services.review.domain.repository import ReviewRepository
from services.review.domain.value_object import Rating, ReviewDraft, ReviewId
from services.shared.domain import HotelId, UserId
from services.shared.domain.exception import DuplicateResourceException
from services.shared.utils.dynamodb import (
    get_table,
    is_conditional_check_failure,
    query_all,
    translate_storage_errors,
)


class DynamoDBReviewRepository(ReviewRepository):
    """DynamoDBを使用したReviewRepository の具象実装"""

    def __init__(
        self,
        table_name: str | None = None,
        timeout_seconds: float = 10.0,
        table=None,
        factory: ReviewFactory | None = None,
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.table = table or get_table(self.table_name, timeout_seconds)
        self._factory = factory or ReviewFactory()

    def create(self, draft: ReviewDraft) -> Review:
        """レビューをDBに保存する"""
        review = self._factory.create(draft)
        item = {
            "PK": f"USER#{review.user_id}",
            "SK": f"REVIEW#{review.id}",
            "entity_type": "REVIEW",
            "review_id": str(review.id),
            "booking_id": str(review.booking_id),
            "user_id": str(review.user_id),
            "hotel_id": str(review.hotel_id),
            "rating": review.rating.value,
            "title": review.title,
            "comment": review.comment,
            "created_at": review.created_at.isoformat(),
            "GSI1PK": f"HOTEL#{review.hotel_id}#REVIEWS",
            "GSI1SK": f"REVIEW#{review.id}",
        }
        with translate_storage_errors("put review"):
            try:
                self.table.put_item(
                    Item=item, ConditionExpression=Attr("PK").not_exists()
                )
            except ClientError as e:
                if is_conditional_check_failure(e):
                    raise DuplicateResourceException(
                        f"Review already exists: {review.id}"
                    ) from e
                raise
        return review

    def find_by_hotel(self, hotel_id: HotelId) -> list[Review]:
        """ホテルのレビュー一覧（GSI1）"""
        with translate_storage_errors("query hotel reviews"):
            items = query_all(
                self.table,
                IndexName="GSI1",
                KeyConditionExpression=Key("GSI1PK").eq(f"HOTEL#{hotel_id}#REVIEWS"),
            )
        return [self._to_entity(item) for item in items]

    def find_by_user(self, user_id: UserId) -> list[Review]:
        """ユーザーのレビュー一覧"""
        with translate_storage_errors("query user reviews"):
            items = query_all(
                self.table,
                KeyConditionExpression=Key("PK").eq(f"USER#{user_id}")
                & Key("SK").begins_with("REVIEW#"),
            )
        return [self._to_entity(item) for item in items]

    def _to_entity(self, item: dict) -> Review:
        return Review(
            id=ReviewId(value=item["review_id"]),
            booking_id=BookingId(value=item["booking_id"]),
            user_id=UserId(value=item["user_id"]),
            hotel_id=HotelId(value=item["hotel_id"]),
            rating=Rating(value=int(item["rating"])),
            created_at=datetime.fromisoformat(item["created_at"]),
            title=item.get("title"),
            comment=item.get("comment"),
        )
