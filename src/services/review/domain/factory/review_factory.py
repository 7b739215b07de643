from datetime import datetime, timezone

from services.review.domain.entity import Review
from services.review.domain.value_object import ReviewDraft, ReviewId


class ReviewFactory:
    """レビューを生成するFactory"""

    def create(self, draft: ReviewDraft) -> Review:
        return Review.from_draft(
            id=ReviewId.generate(),
            draft=draft,
            created_at=datetime.now(timezone.utc),
        )
