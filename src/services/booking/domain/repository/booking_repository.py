from abc import abstractmethod

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import BookingDraft, BookingId
from services.shared.domain import Repository, UserId


class BookingRepository(Repository[Booking, BookingDraft]):
    """予約レポジトリのインターフェース

    すべての操作はデータストア障害時に StorageUnavailableException を送出する。
    """

    @abstractmethod
    def create(self, draft: BookingDraft) -> Booking:
        """予約を採番して保存する（単一アイテムの書き込みで、部分的な保存は起きない）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user(self, user_id: UserId) -> list[Booking]:
        """ユーザーの予約一覧を取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_payment_intent_id(self, intent_id: str) -> Booking | None:
        """PaymentIntent ID で検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id_for_user(
        self, user_id: UserId, booking_id: BookingId
    ) -> Booking | None:
        """ユーザー本人の予約を予約IDで検索する"""
        raise NotImplementedError
