from services.catalog.domain.entity import Hotel, Room
from services.catalog.domain.repository import CatalogRepository
from services.shared.domain import HotelId, ResourceNotFoundException


class BrowseCatalogService:
    """ホテル・客室の閲覧ユースケース"""

    def __init__(self, repository: CatalogRepository) -> None:
        self._repository = repository

    def list_hotels(self) -> list[Hotel]:
        return self._repository.list_hotels()

    def get_hotel(self, hotel_id: HotelId) -> Hotel:
        """ホテルを取得する（存在しなければ ResourceNotFoundException）"""
        hotel = self._repository.find_hotel(hotel_id)
        if hotel is None:
            raise ResourceNotFoundException("hotel")
        return hotel

    def list_rooms(self, hotel_id: HotelId) -> list[Room]:
        return self._repository.find_rooms_by_hotel(hotel_id)
