from decimal import Decimal

from services.shared.domain import Entity, HotelId, RoomId


class Room(Entity[RoomId]):
    """客室エンティティ（予約処理からは参照専用）"""

    def __init__(
        self,
        id: RoomId,
        hotel_id: HotelId,
        room_number: str,
        room_type: str,
        capacity: int,
        price_per_night: Decimal,
        description: str | None = None,
        amenities: tuple[str, ...] = (),
        images: tuple[str, ...] = (),
        is_available: bool = True,
    ) -> None:
        super().__init__(id)
        if capacity < 1:
            raise ValueError("Room capacity must be at least 1")
        if price_per_night < 0:
            raise ValueError("Price per night cannot be negative")
        self._hotel_id = hotel_id
        self._room_number = room_number
        self._room_type = room_type
        self._capacity = capacity
        self._price_per_night = price_per_night
        self._description = description
        self._amenities = tuple(amenities)
        self._images = tuple(images)
        self._is_available = is_available

    @property
    def hotel_id(self) -> HotelId:
        return self._hotel_id

    @property
    def room_number(self) -> str:
        return self._room_number

    @property
    def room_type(self) -> str:
        return self._room_type

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def price_per_night(self) -> Decimal:
        return self._price_per_night

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def amenities(self) -> tuple[str, ...]:
        return self._amenities

    @property
    def images(self) -> tuple[str, ...]:
        return self._images

    @property
    def is_available(self) -> bool:
        return self._is_available

    def can_accommodate(self, guest_count: int) -> bool:
        """宿泊人数が定員以内かどうか"""
        return guest_count <= self._capacity
