from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.catalog.infrastructure.dynamodb_catalog_repository import (
    DynamoDBCatalogRepository,
)
from services.shared.domain import HotelId, RoomId

HOTEL_ITEM = {
    "PK": "HOTEL#hotel-1",
    "SK": "HOTEL#hotel-1",
    "hotel_id": "hotel-1",
    "name": "Seaside Inn",
    "address": "1 Ocean Drive",
    "city": "Miami",
    "state": "FL",
    "country": "US",
    "zip_code": "33139",
    "partner_id": "partner-1",
    "amenities": ["wifi", "pool"],
    "rating": Decimal("4.5"),
    "is_active": True,
    "created_at": "2024-01-01T00:00:00+00:00",
}

ROOM_ITEM = {
    "PK": "ROOM#room-1",
    "SK": "ROOM#room-1",
    "room_id": "room-1",
    "hotel_id": "hotel-1",
    "room_number": "101",
    "room_type": "double",
    "capacity": Decimal("2"),
    "price_per_night": "100.00",
}


@pytest.fixture
def table():
    return MagicMock()


@pytest.fixture
def repository(table):
    return DynamoDBCatalogRepository(table=table)


class TestDynamoDBCatalogRepository:
    def test_list_hotels_skips_inactive(self, repository, table):
        table.query.return_value = {
            "Items": [
                HOTEL_ITEM,
                dict(HOTEL_ITEM, hotel_id="hotel-2", is_active=False),
            ]
        }

        hotels = repository.list_hotels()

        assert [str(h.id) for h in hotels] == ["hotel-1"]
        assert hotels[0].address.city == "Miami"
        assert hotels[0].amenities == ("wifi", "pool")

    def test_find_room_converts_dynamodb_numbers(self, repository, table):
        table.get_item.return_value = {"Item": ROOM_ITEM}

        room = repository.find_room(RoomId(value="room-1"))

        assert room.capacity == 2
        assert room.price_per_night == Decimal("100.00")
        assert room.hotel_id == HotelId(value="hotel-1")
        assert table.get_item.call_args.kwargs["Key"] == {
            "PK": "ROOM#room-1",
            "SK": "ROOM#room-1",
        }

    def test_find_hotel_returns_none_when_absent(self, repository, table):
        table.get_item.return_value = {}

        assert repository.find_hotel(HotelId(value="missing")) is None

    def test_find_rooms_by_hotel_uses_index(self, repository, table):
        table.query.return_value = {"Items": [ROOM_ITEM]}

        rooms = repository.find_rooms_by_hotel(HotelId(value="hotel-1"))

        assert len(rooms) == 1
        assert table.query.call_args.kwargs["IndexName"] == "GSI1"
