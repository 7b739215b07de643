import json
import os
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

# handler モジュールはインポート時に設定を読み込むため、先に環境変数を用意する
os.environ.setdefault("TABLE_NAME", "hotel-booking-test")
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_dummy")
os.environ.setdefault("STRIPE_PUBLISHABLE_KEY", "pk_test_dummy")
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "hotel-booking-test")

from services.booking.domain.entity import Booking  # noqa: E402
from services.booking.domain.enum import BookingStatus, PaymentStatus  # noqa: E402
from services.booking.domain.value_object import (  # noqa: E402
    BookingId,
    SplitParticipant,
    StayPeriod,
)
from services.catalog.domain.entity import Hotel, Room  # noqa: E402
from services.catalog.domain.value_object import Address  # noqa: E402
from services.shared.domain import (  # noqa: E402
    AuthContext,
    Currency,
    HotelId,
    Money,
    RoomId,
    UserId,
)


@pytest.fixture
def user_id():
    """全テスト共通の UserId フィクスチャ"""
    return UserId(value="user-1")


@pytest.fixture
def auth(user_id):
    return AuthContext(user_id=user_id, user_type="guest")


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_hotel():
    """Hotel を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        hotel_id: str = "hotel-1",
        name: str = "Seaside Inn",
        is_active: bool = True,
    ) -> Hotel:
        return Hotel(
            id=HotelId(value=hotel_id),
            name=name,
            address=Address(
                street="1 Ocean Drive",
                city="Miami",
                state="FL",
                country="US",
                zip_code="33139",
            ),
            partner_id=UserId(value="partner-1"),
            rating=Decimal("4.50"),
            is_active=is_active,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

    return _factory


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture"""

    def _factory(
        room_id: str = "room-1",
        hotel_id: str = "hotel-1",
        capacity: int = 2,
        price_per_night: Decimal = Decimal("100.00"),
    ) -> Room:
        return Room(
            id=RoomId(value=room_id),
            hotel_id=HotelId(value=hotel_id),
            room_number="101",
            room_type="double",
            capacity=capacity,
            price_per_night=price_per_night,
        )

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        booking_id: str = "booking-1",
        user_id: str = "user-1",
        hotel_id: str = "hotel-1",
        status: BookingStatus = BookingStatus.CONFIRMED,
        total_amount: Decimal = Decimal("336.00"),
        payment_intent_id: str = "pi_123",
        split_emails: tuple[str, ...] = (),
        share: Decimal = Decimal("0"),
    ) -> Booking:
        currency = Currency.usd()
        return Booking(
            id=BookingId(value=booking_id),
            user_id=UserId(value=user_id),
            hotel_id=HotelId(value=hotel_id),
            room_id=RoomId(value="room-1"),
            stay_period=StayPeriod(
                check_in=date(2024, 6, 1), check_out=date(2024, 6, 4)
            ),
            guest_count=2,
            total_amount=Money(amount=total_amount, currency=currency),
            payment_intent_id=payment_intent_id,
            created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
            payment_status=PaymentStatus.PENDING,
            status=status,
            is_split_payment=bool(split_emails),
            split_participants=tuple(
                SplitParticipant(email=email, amount=Money(share, currency))
                for email in split_emails
            ),
        )

    return _factory


@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST) のプロキシイベントを生成する Factory fixture"""

    def _factory(
        body: dict | str | None = None,
        path_parameters: dict | None = None,
        user_id: str | None = "user-1",
        method: str = "GET",
        path: str = "/api",
    ) -> dict:
        authorizer = {"userId": user_id, "userType": "guest"} if user_id else None
        return {
            "resource": path,
            "path": path,
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "queryStringParameters": None,
            "pathParameters": path_parameters,
            "requestContext": {
                "requestId": "req-1",
                "stage": "prod",
                "authorizer": authorizer,
            },
            "body": json.dumps(body) if isinstance(body, dict) else body,
            "isBase64Encoded": False,
        }

    return _factory
