from abc import ABC, abstractmethod

from services.catalog.domain.entity import Hotel, Room
from services.shared.domain import HotelId, RoomId


class CatalogRepository(ABC):
    """ホテル・客室カタログの参照用インターフェース"""

    @abstractmethod
    def list_hotels(self) -> list[Hotel]:
        """公開中のホテル一覧を取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_hotel(self, hotel_id: HotelId) -> Hotel | None:
        """ホテルIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_rooms_by_hotel(self, hotel_id: HotelId) -> list[Room]:
        """ホテルに属する客室を取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_room(self, room_id: RoomId) -> Room | None:
        """客室IDで検索する"""
        raise NotImplementedError
