from datetime import datetime, timezone

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import BookingDraft, BookingId


class BookingFactory:
    """予約を生成するFactory"""

    def create(self, draft: BookingDraft) -> Booking:
        """下書きから新規予約のエンティティを作成する（ID・作成日時を採番）"""
        return Booking.from_draft(
            id=BookingId.generate(),
            draft=draft,
            created_at=datetime.now(timezone.utc),
        )
