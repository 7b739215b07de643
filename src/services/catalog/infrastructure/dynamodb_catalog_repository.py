import os
from datetime import datetime

from boto3.dynamodb.conditions import Key

from services.catalog.domain.entity import Hotel, Room
from services.catalog.domain.repository import CatalogRepository
from services.catalog.domain.value_object import Address
from services.shared.domain import HotelId, RoomId, UserId
from services.shared.utils import to_decimal
from services.shared.utils.dynamodb import (
    get_table,
    query_all,
    translate_storage_errors,
)


class DynamoDBCatalogRepository(CatalogRepository):
    """DynamoDBを使用したCatalogRepository の具象実装"""

    def __init__(
        self,
        table_name: str | None = None,
        timeout_seconds: float = 10.0,
        table=None,
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.table = table or get_table(self.table_name, timeout_seconds)

    def list_hotels(self) -> list[Hotel]:
        """公開中のホテル一覧"""
        with translate_storage_errors("query hotels"):
            items = query_all(
                self.table,
                IndexName="GSI1",
                KeyConditionExpression=Key("GSI1PK").eq("HOTELS"),
            )
        hotels = [self._to_hotel(item) for item in items]
        return [hotel for hotel in hotels if hotel.is_active]

    def find_hotel(self, hotel_id: HotelId) -> Hotel | None:
        """ホテルIDで検索"""
        with translate_storage_errors("get hotel"):
            response = self.table.get_item(
                Key={"PK": f"HOTEL#{hotel_id}", "SK": f"HOTEL#{hotel_id}"},
            )
        item = response.get("Item")
        if not item:
            return None
        return self._to_hotel(item)

    def find_rooms_by_hotel(self, hotel_id: HotelId) -> list[Room]:
        """ホテルに属する客室"""
        with translate_storage_errors("query rooms"):
            items = query_all(
                self.table,
                IndexName="GSI1",
                KeyConditionExpression=Key("GSI1PK").eq(f"HOTEL#{hotel_id}#ROOMS"),
            )
        return [self._to_room(item) for item in items]

    def find_room(self, room_id: RoomId) -> Room | None:
        """客室IDで検索"""
        with translate_storage_errors("get room"):
            response = self.table.get_item(
                Key={"PK": f"ROOM#{room_id}", "SK": f"ROOM#{room_id}"},
                ConsistentRead=True,
            )
        item = response.get("Item")
        if not item:
            return None
        return self._to_room(item)

    def _to_hotel(self, item: dict) -> Hotel:
        """DynamoDB アイテムをホテルエンティティに変換する"""
        created_at = item.get("created_at")
        return Hotel(
            id=HotelId(value=item["hotel_id"]),
            name=item["name"],
            address=Address(
                street=item["address"],
                city=item["city"],
                state=item.get("state", ""),
                country=item.get("country", ""),
                zip_code=item.get("zip_code", ""),
            ),
            partner_id=UserId(value=item["partner_id"]),
            description=item.get("description"),
            phone=item.get("phone"),
            email=item.get("email"),
            amenities=tuple(item.get("amenities") or ()),
            images=tuple(item.get("images") or ()),
            rating=to_decimal(item.get("rating", "0.00")),
            is_active=bool(item.get("is_active", True)),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )

    def _to_room(self, item: dict) -> Room:
        """DynamoDB アイテムを客室エンティティに変換する"""
        return Room(
            id=RoomId(value=item["room_id"]),
            hotel_id=HotelId(value=item["hotel_id"]),
            room_number=item["room_number"],
            room_type=item["room_type"],
            capacity=int(item["capacity"]),
            price_per_night=to_decimal(item["price_per_night"]),
            description=item.get("description"),
            amenities=tuple(item.get("amenities") or ()),
            images=tuple(item.get("images") or ()),
            is_available=bool(item.get("is_available", True)),
        )
