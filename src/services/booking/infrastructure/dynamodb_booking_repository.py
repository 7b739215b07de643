import os
from datetime import date, datetime

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.factory import BookingFactory
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import (
    BookingDraft,
    BookingId,
    SplitParticipant,
    StayPeriod,
)
from services.shared.domain import Currency, HotelId, Money, RoomId, UserId
from services.shared.domain.exception import DuplicateResourceException
from services.shared.utils import to_decimal
from services.shared.utils.dynamodb import (
    get_table,
    is_conditional_check_failure,
    query_all,
    translate_storage_errors,
)


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装"""

    def __init__(
        self,
        table_name: str | None = None,
        timeout_seconds: float = 10.0,
        table=None,
        factory: BookingFactory | None = None,
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.table = table or get_table(self.table_name, timeout_seconds)
        self._factory = factory or BookingFactory()

    def create(self, draft: BookingDraft) -> Booking:
        """予約をDBに保存する"""
        booking = self._factory.create(draft)
        item = {
            "PK": f"USER#{booking.user_id}",
            "SK": f"BOOKING#{booking.id}",
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "user_id": str(booking.user_id),
            "hotel_id": str(booking.hotel_id),
            "room_id": str(booking.room_id),
            "check_in_date": booking.stay_period.check_in.isoformat(),
            "check_out_date": booking.stay_period.check_out.isoformat(),
            "guest_count": booking.guest_count,
            "total_amount": str(booking.total_amount.amount),
            "currency": str(booking.total_amount.currency),
            "payment_status": booking.payment_status.value,
            "payment_intent_id": booking.payment_intent_id,
            "status": booking.status.value,
            "special_requests": booking.special_requests,
            "is_split_payment": booking.is_split_payment,
            "split_payment_data": booking.split_payment_data(),
            "created_at": booking.created_at.isoformat(),
            "updated_at": booking.updated_at.isoformat(),
            "GSI1PK": f"PAYMENT_INTENT#{booking.payment_intent_id}",
            "GSI1SK": f"BOOKING#{booking.id}",
        }
        with translate_storage_errors("put booking"):
            try:
                self.table.put_item(
                    Item=item, ConditionExpression=Attr("PK").not_exists()
                )
            except ClientError as e:
                if is_conditional_check_failure(e):
                    raise DuplicateResourceException(
                        f"Booking already exists: {booking.id}"
                    ) from e
                raise
        return booking

    def find_by_user(self, user_id: UserId) -> list[Booking]:
        """ユーザーの予約一覧"""
        with translate_storage_errors("query bookings"):
            items = query_all(
                self.table,
                KeyConditionExpression=Key("PK").eq(f"USER#{user_id}")
                & Key("SK").begins_with("BOOKING#"),
                ConsistentRead=True,
            )
        return [self._to_entity(item) for item in items]

    def find_by_payment_intent_id(self, intent_id: str) -> Booking | None:
        """PaymentIntent ID で検索（GSI1）"""
        with translate_storage_errors("query booking by payment intent"):
            response = self.table.query(
                IndexName="GSI1",
                KeyConditionExpression=Key("GSI1PK").eq(f"PAYMENT_INTENT#{intent_id}"),
            )
        items = response.get("Items", [])
        if not items:
            return None
        return self._to_entity(items[0])

    def find_by_id_for_user(
        self, user_id: UserId, booking_id: BookingId
    ) -> Booking | None:
        """ユーザー本人の予約を予約IDで検索"""
        with translate_storage_errors("get booking"):
            response = self.table.get_item(
                Key={"PK": f"USER#{user_id}", "SK": f"BOOKING#{booking_id}"},
                ConsistentRead=True,
            )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = Currency(item["currency"])
        split_data = item.get("split_payment_data") or {}
        participants = tuple(
            SplitParticipant(
                email=p["email"],
                amount=Money(amount=to_decimal(p["amount"]), currency=currency),
                paid=bool(p.get("paid", False)),
            )
            for p in split_data.get("participants", [])
        )
        return Booking(
            id=BookingId(value=item["booking_id"]),
            user_id=UserId(value=item["user_id"]),
            hotel_id=HotelId(value=item["hotel_id"]),
            room_id=RoomId(value=item["room_id"]),
            stay_period=StayPeriod(
                check_in=date.fromisoformat(item["check_in_date"]),
                check_out=date.fromisoformat(item["check_out_date"]),
            ),
            guest_count=int(item["guest_count"]),
            total_amount=Money(
                amount=to_decimal(item["total_amount"]), currency=currency
            ),
            payment_intent_id=item["payment_intent_id"],
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=datetime.fromisoformat(item["updated_at"]),
            payment_status=PaymentStatus(item["payment_status"]),
            status=BookingStatus(item["status"]),
            special_requests=item.get("special_requests"),
            is_split_payment=bool(item.get("is_split_payment", False)),
            split_participants=participants,
        )
