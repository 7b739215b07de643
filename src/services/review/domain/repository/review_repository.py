from abc import abstractmethod

from services.review.domain.entity import Review
from services.review.domain.value_object import ReviewDraft
from services.shared.domain import HotelId, Repository, UserId


class ReviewRepository(Repository[Review, ReviewDraft]):
    """レビューレポジトリのインターフェース"""

    @abstractmethod
    def create(self, draft: ReviewDraft) -> Review:
        raise NotImplementedError

    @abstractmethod
    def find_by_hotel(self, hotel_id: HotelId) -> list[Review]:
        """ホテルのレビュー一覧を取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user(self, user_id: UserId) -> list[Review]:
        """ユーザーが投稿したレビュー一覧を取得する"""
        raise NotImplementedError
