from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.shared.domain import AuthContext, ResourceNotFoundException


class MyBookingsService:
    """ログインユーザー本人の予約参照ユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def list_bookings(self, auth: AuthContext) -> list[Booking]:
        """本人の予約一覧"""
        return self._repository.find_by_user(auth.user_id)

    def get_booking(self, auth: AuthContext, booking_id: BookingId) -> Booking:
        """本人の予約を1件取得する（他人の予約は存在しない扱い）"""
        booking = self._repository.find_by_id_for_user(auth.user_id, booking_id)
        if booking is None:
            raise ResourceNotFoundException("booking")
        return booking
