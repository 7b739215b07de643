from datetime import datetime

from services.review.applications.list_reviews import ReviewWithHotel
from services.review.domain.entity import Review
from services.shared.utils.camel_case_model import CamelCaseModel


class ReviewData(CamelCaseModel):
    """レビューのレスポンスモデル"""

    id: str
    booking_id: str
    user_id: str
    hotel_id: str
    rating: int
    title: str | None
    comment: str | None
    created_at: datetime


class HotelSummary(CamelCaseModel):
    id: str
    name: str


class MyReviewData(CamelCaseModel):
    """本人のレビュー一覧のレスポンスモデル"""

    id: str
    rating: int
    title: str | None
    comment: str | None
    created_at: datetime
    hotel: HotelSummary | None


def to_review_data(review: Review) -> dict:
    """Review エンティティをレスポンス辞書に変換する"""
    return ReviewData(
        id=str(review.id),
        booking_id=str(review.booking_id),
        user_id=str(review.user_id),
        hotel_id=str(review.hotel_id),
        rating=review.rating.value,
        title=review.title,
        comment=review.comment,
        created_at=review.created_at,
    ).to_json_dict()


def to_my_review_data(entry: ReviewWithHotel) -> dict:
    review, hotel = entry.review, entry.hotel
    return MyReviewData(
        id=str(review.id),
        rating=review.rating.value,
        title=review.title,
        comment=review.comment,
        created_at=review.created_at,
        hotel=(
            HotelSummary(id=str(hotel.id), name=hotel.name)
            if hotel is not None
            else None
        ),
    ).to_json_dict()
