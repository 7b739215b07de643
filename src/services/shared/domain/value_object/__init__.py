from .auth_context import AuthContext
from .currency import Currency
from .hotel_id import HotelId
from .money import Money
from .room_id import RoomId
from .user_id import UserId

__all__ = ["AuthContext", "Currency", "HotelId", "Money", "RoomId", "UserId"]
