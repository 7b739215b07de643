from decimal import Decimal

import pytest

from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.shared.domain import HotelId, Money, UserId
from services.shared.domain.exception import BusinessRuleViolationException


class TestBooking:
    def test_new_booking_defaults(self, create_booking):
        booking = create_booking()

        assert booking.payment_status == PaymentStatus.PENDING
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.updated_at == booking.created_at
        assert booking.split_payment_data() is None
        assert booking.owner_share == booking.total_amount

    def test_split_payment_data(self, create_booking):
        booking = create_booking(
            total_amount=Decimal("112.00"),
            split_emails=("a@example.com", "b@example.com"),
            share=Decimal("37.33"),
        )

        assert booking.split_payment_data() == {
            "participants": [
                {"email": "a@example.com", "amount": "37.33", "paid": False},
                {"email": "b@example.com", "amount": "37.33", "paid": False},
            ]
        }
        assert booking.owner_share == Money.usd(Decimal("37.34"))

    def test_shares_exceeding_total_raise_error(self, create_booking):
        with pytest.raises(BusinessRuleViolationException):
            create_booking(
                total_amount=Decimal("100.00"),
                split_emails=("a@example.com", "b@example.com"),
                share=Decimal("60.00"),
            )

    def test_is_owned_by(self, create_booking):
        booking = create_booking(user_id="user-1")

        assert booking.is_owned_by(UserId(value="user-1"))
        assert not booking.is_owned_by(UserId(value="user-2"))

    @pytest.mark.parametrize(
        "status, hotel_id, expected",
        [
            (BookingStatus.COMPLETED, "hotel-1", True),
            (BookingStatus.CONFIRMED, "hotel-1", False),
            (BookingStatus.CANCELLED, "hotel-1", False),
            (BookingStatus.COMPLETED, "hotel-2", False),
        ],
    )
    def test_is_reviewable_for(self, create_booking, status, hotel_id, expected):
        booking = create_booking(status=status, hotel_id="hotel-1")

        assert booking.is_reviewable_for(HotelId(value=hotel_id)) is expected

    def test_equality_is_by_id(self, create_booking):
        assert create_booking(booking_id="b-1") == create_booking(
            booking_id="b-1", total_amount=Decimal("1.00")
        )
        assert create_booking(booking_id="b-1") != create_booking(booking_id="b-2")
