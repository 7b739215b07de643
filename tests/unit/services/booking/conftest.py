from unittest.mock import MagicMock

import pytest

from services.booking.domain.factory import BookingFactory
from services.payment.domain.value_object import PaymentIntent


@pytest.fixture
def mock_catalog(create_room):
    catalog = MagicMock()
    catalog.find_room.return_value = create_room()
    return catalog


@pytest.fixture
def mock_gateway():
    gateway = MagicMock()
    gateway.create_intent.return_value = PaymentIntent(
        intent_id="pi_123", client_secret="pi_123_secret_abc"
    )
    return gateway


@pytest.fixture
def booking_repository():
    """create() で下書きから予約を生成して返すリポジトリのモック"""
    repository = MagicMock()
    repository.create.side_effect = BookingFactory().create
    return repository
