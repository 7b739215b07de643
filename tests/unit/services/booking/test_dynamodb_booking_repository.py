from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from services.booking.domain.value_object import (
    BookingDraft,
    BookingId,
    SplitParticipant,
    StayPeriod,
)
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import HotelId, Money, RoomId, UserId
from services.shared.domain.exception import (
    DuplicateResourceException,
    StorageUnavailableException,
)


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "PutItem")


@pytest.fixture
def table():
    return MagicMock()


@pytest.fixture
def repository(table):
    return DynamoDBBookingRepository(table=table)


@pytest.fixture
def draft():
    return BookingDraft(
        user_id=UserId(value="user-1"),
        hotel_id=HotelId(value="hotel-1"),
        room_id=RoomId(value="room-1"),
        stay_period=StayPeriod(check_in=date(2024, 6, 1), check_out=date(2024, 6, 4)),
        guest_count=2,
        total_amount=Money.usd(Decimal("336.00")),
        payment_intent_id="pi_123",
        is_split_payment=True,
        split_participants=(
            SplitParticipant(
                email="a@example.com", amount=Money.usd(Decimal("112.00"))
            ),
        ),
    )


class TestDynamoDBBookingRepository:
    def test_create_writes_single_item_with_keys(self, repository, table, draft):
        booking = repository.create(draft)

        table.put_item.assert_called_once()
        item = table.put_item.call_args.kwargs["Item"]
        assert item["PK"] == "USER#user-1"
        assert item["SK"] == f"BOOKING#{booking.id}"
        assert item["GSI1PK"] == "PAYMENT_INTENT#pi_123"
        assert item["total_amount"] == "336.00"
        assert item["currency"] == "USD"
        assert item["payment_status"] == "pending"
        assert item["status"] == "confirmed"
        assert item["check_in_date"] == "2024-06-01"
        assert item["split_payment_data"] == {
            "participants": [
                {"email": "a@example.com", "amount": "112.00", "paid": False}
            ]
        }
        assert "ConditionExpression" in table.put_item.call_args.kwargs

    def test_create_conflict_raises_duplicate(self, repository, table, draft):
        table.put_item.side_effect = _client_error("ConditionalCheckFailedException")

        with pytest.raises(DuplicateResourceException):
            repository.create(draft)

    def test_create_storage_error_is_translated(self, repository, table, draft):
        table.put_item.side_effect = _client_error("ProvisionedThroughputExceeded")

        with pytest.raises(StorageUnavailableException):
            repository.create(draft)

    def test_item_round_trips_to_entity(self, repository, table, draft):
        booking = repository.create(draft)
        item = table.put_item.call_args.kwargs["Item"]
        table.query.return_value = {"Items": [item]}

        found = repository.find_by_payment_intent_id("pi_123")

        assert found == booking
        assert found.total_amount == booking.total_amount
        assert found.stay_period == booking.stay_period
        assert found.split_participants == booking.split_participants
        assert found.created_at == booking.created_at
        assert table.query.call_args.kwargs["IndexName"] == "GSI1"

    def test_find_by_payment_intent_id_returns_none_when_absent(
        self, repository, table
    ):
        table.query.return_value = {"Items": []}

        assert repository.find_by_payment_intent_id("pi_missing") is None

    def test_find_by_user_follows_pagination(self, repository, table, draft):
        repository.create(draft)
        item = table.put_item.call_args.kwargs["Item"]
        table.query.side_effect = [
            {"Items": [item], "LastEvaluatedKey": {"PK": "x", "SK": "y"}},
            {"Items": [dict(item, booking_id="booking-2", SK="BOOKING#booking-2")]},
        ]

        bookings = repository.find_by_user(UserId(value="user-1"))

        assert [str(b.id) for b in bookings][1] == "booking-2"
        assert table.query.call_count == 2
        second_call = table.query.call_args_list[1].kwargs
        assert second_call["ExclusiveStartKey"] == {"PK": "x", "SK": "y"}

    def test_find_by_id_for_user_uses_owner_key(self, repository, table):
        table.get_item.return_value = {}

        result = repository.find_by_id_for_user(
            UserId(value="user-2"), BookingId(value="booking-1")
        )

        assert result is None
        assert table.get_item.call_args.kwargs["Key"] == {
            "PK": "USER#user-2",
            "SK": "BOOKING#booking-1",
        }
