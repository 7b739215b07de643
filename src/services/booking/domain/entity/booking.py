from datetime import datetime

from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.value_object import (
    BookingDraft,
    BookingId,
    SplitParticipant,
    StayPeriod,
)
from services.shared.domain import Entity, HotelId, Money, RoomId, UserId
from services.shared.domain.exception import BusinessRuleViolationException


class Booking(Entity[BookingId]):
    """予約エンティティ

    合計金額は作成時に一度だけ計算され、以後再計算しない。
    """

    def __init__(
        self,
        id: BookingId,
        user_id: UserId,
        hotel_id: HotelId,
        room_id: RoomId,
        stay_period: StayPeriod,
        guest_count: int,
        total_amount: Money,
        payment_intent_id: str,
        created_at: datetime,
        updated_at: datetime | None = None,
        payment_status: PaymentStatus = PaymentStatus.PENDING,
        status: BookingStatus = BookingStatus.CONFIRMED,
        special_requests: str | None = None,
        is_split_payment: bool = False,
        split_participants: tuple[SplitParticipant, ...] = (),
    ) -> None:
        super().__init__(id)
        if guest_count < 1:
            raise BusinessRuleViolationException("Guest count must be at least 1")
        participants = tuple(split_participants)
        shares = Money.zero(total_amount.currency)
        for participant in participants:
            shares = shares.add(participant.amount)
        if shares.amount > total_amount.amount:
            raise BusinessRuleViolationException(
                "Split payment shares cannot exceed the booking total"
            )
        self._user_id = user_id
        self._hotel_id = hotel_id
        self._room_id = room_id
        self._stay_period = stay_period
        self._guest_count = guest_count
        self._total_amount = total_amount
        self._payment_intent_id = payment_intent_id
        self._created_at = created_at
        self._updated_at = updated_at or created_at
        self._payment_status = payment_status
        self._status = status
        self._special_requests = special_requests
        self._is_split_payment = is_split_payment
        self._split_participants = participants
        self._participant_total = shares

    @classmethod
    def from_draft(
        cls, id: BookingId, draft: BookingDraft, created_at: datetime
    ) -> "Booking":
        """下書きに ID と作成日時を割り当てて予約を生成する"""
        return cls(
            id=id,
            user_id=draft.user_id,
            hotel_id=draft.hotel_id,
            room_id=draft.room_id,
            stay_period=draft.stay_period,
            guest_count=draft.guest_count,
            total_amount=draft.total_amount,
            payment_intent_id=draft.payment_intent_id,
            created_at=created_at,
            payment_status=draft.payment_status,
            status=draft.status,
            special_requests=draft.special_requests,
            is_split_payment=draft.is_split_payment,
            split_participants=draft.split_participants,
        )

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def hotel_id(self) -> HotelId:
        return self._hotel_id

    @property
    def room_id(self) -> RoomId:
        return self._room_id

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def guest_count(self) -> int:
        return self._guest_count

    @property
    def total_amount(self) -> Money:
        return self._total_amount

    @property
    def payment_intent_id(self) -> str:
        return self._payment_intent_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def payment_status(self) -> PaymentStatus:
        return self._payment_status

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def special_requests(self) -> str | None:
        return self._special_requests

    @property
    def is_split_payment(self) -> bool:
        return self._is_split_payment

    @property
    def split_participants(self) -> tuple[SplitParticipant, ...]:
        return self._split_participants

    @property
    def owner_share(self) -> Money:
        """予約者本人の負担額（端数は予約者が負担する）"""
        return self._total_amount.subtract(self._participant_total)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self._user_id == user_id

    def is_reviewable_for(self, hotel_id: HotelId) -> bool:
        """レビュー可能か（同じホテルの完了済み予約のみ）"""
        return self._hotel_id == hotel_id and self._status == BookingStatus.COMPLETED

    def split_payment_data(self) -> dict | None:
        """永続化・レスポンス用の割り勘データ"""
        if not self._is_split_payment:
            return None
        return {"participants": [p.to_dict() for p in self._split_participants]}
