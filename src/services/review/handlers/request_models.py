from pydantic import Field, field_validator

from services.review.domain.value_object import MAX_RATING, MIN_RATING
from services.shared.utils import to_id_string
from services.shared.utils.camel_case_model import CamelCaseModel


class SubmitReviewRequest(CamelCaseModel):
    """レビュー投稿リクエストモデル"""

    booking_id: str = Field(..., min_length=1)
    hotel_id: str = Field(..., min_length=1)
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING, description="評価（1〜5）")
    title: str | None = Field(default=None, max_length=200)
    comment: str | None = Field(default=None, max_length=5000)

    @field_validator("booking_id", "hotel_id", mode="before")
    @classmethod
    def convert_id_to_string(cls, v: object) -> object:
        return to_id_string(v)
