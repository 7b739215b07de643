from datetime import datetime
from decimal import Decimal

from services.catalog.domain.value_object import Address
from services.shared.domain import Entity, HotelId, UserId


class Hotel(Entity[HotelId]):
    """ホテルエンティティ（参照専用）"""

    def __init__(
        self,
        id: HotelId,
        name: str,
        address: Address,
        partner_id: UserId,
        description: str | None = None,
        phone: str | None = None,
        email: str | None = None,
        amenities: tuple[str, ...] = (),
        images: tuple[str, ...] = (),
        rating: Decimal = Decimal("0.00"),
        is_active: bool = True,
        created_at: datetime | None = None,
    ) -> None:
        super().__init__(id)
        if not name or not name.strip():
            raise ValueError("Hotel name cannot be empty")
        self._name = name
        self._address = address
        self._partner_id = partner_id
        self._description = description
        self._phone = phone
        self._email = email
        self._amenities = tuple(amenities)
        self._images = tuple(images)
        self._rating = rating
        self._is_active = is_active
        self._created_at = created_at

    @property
    def name(self) -> str:
        return self._name

    @property
    def address(self) -> Address:
        return self._address

    @property
    def partner_id(self) -> UserId:
        return self._partner_id

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def phone(self) -> str | None:
        return self._phone

    @property
    def email(self) -> str | None:
        return self._email

    @property
    def amenities(self) -> tuple[str, ...]:
        return self._amenities

    @property
    def images(self) -> tuple[str, ...]:
        return self._images

    @property
    def rating(self) -> Decimal:
        return self._rating

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime | None:
        return self._created_at
