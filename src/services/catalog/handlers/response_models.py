from __future__ import annotations

from datetime import datetime

from services.catalog.domain.entity import Hotel, Room
from services.shared.utils.camel_case_model import CamelCaseModel


class HotelData(CamelCaseModel):
    """ホテルデータのレスポンスモデル"""

    id: str
    name: str
    description: str | None
    address: str
    city: str
    state: str
    country: str
    zip_code: str
    phone: str | None
    email: str | None
    amenities: list[str]
    images: list[str]
    rating: str
    partner_id: str
    is_active: bool
    created_at: datetime | None


class RoomData(CamelCaseModel):
    """客室データのレスポンスモデル"""

    id: str
    hotel_id: str
    room_number: str
    type: str
    capacity: int
    price_per_night: str
    description: str | None
    amenities: list[str]
    images: list[str]
    is_available: bool


def to_hotel_data(hotel: Hotel) -> dict:
    """Hotel エンティティをレスポンス辞書に変換する"""
    return HotelData(
        id=str(hotel.id),
        name=hotel.name,
        description=hotel.description,
        address=hotel.address.street,
        city=hotel.address.city,
        state=hotel.address.state,
        country=hotel.address.country,
        zip_code=hotel.address.zip_code,
        phone=hotel.phone,
        email=hotel.email,
        amenities=list(hotel.amenities),
        images=list(hotel.images),
        rating=str(hotel.rating),
        partner_id=str(hotel.partner_id),
        is_active=hotel.is_active,
        created_at=hotel.created_at,
    ).to_json_dict()


def to_room_data(room: Room) -> dict:
    """Room エンティティをレスポンス辞書に変換する"""
    return RoomData(
        id=str(room.id),
        hotel_id=str(room.hotel_id),
        room_number=room.room_number,
        type=room.room_type,
        capacity=room.capacity,
        price_per_night=str(room.price_per_night),
        description=room.description,
        amenities=list(room.amenities),
        images=list(room.images),
        is_available=room.is_available,
    ).to_json_dict()
