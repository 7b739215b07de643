from dataclasses import dataclass

from services.catalog.domain.entity import Hotel
from services.catalog.domain.repository import CatalogRepository
from services.review.domain.entity import Review
from services.review.domain.repository import ReviewRepository
from services.shared.domain import AuthContext, HotelId


@dataclass(frozen=True)
class ReviewWithHotel:
    """ホテル情報付きのレビュー（ホテルが削除済みなら hotel は None）"""

    review: Review
    hotel: Hotel | None


class ListReviewsService:
    """レビュー参照のユースケース"""

    def __init__(
        self, repository: ReviewRepository, catalog: CatalogRepository
    ) -> None:
        self._repository = repository
        self._catalog = catalog

    def list_for_hotel(self, hotel_id: HotelId) -> list[Review]:
        return self._repository.find_by_hotel(hotel_id)

    def list_mine(self, auth: AuthContext) -> list[ReviewWithHotel]:
        """本人のレビュー一覧（ホテル名付き）"""
        reviews = self._repository.find_by_user(auth.user_id)
        hotels: dict[HotelId, Hotel | None] = {}
        for review in reviews:
            if review.hotel_id not in hotels:
                hotels[review.hotel_id] = self._catalog.find_hotel(review.hotel_id)
        return [
            ReviewWithHotel(review=review, hotel=hotels[review.hotel_id])
            for review in reviews
        ]
