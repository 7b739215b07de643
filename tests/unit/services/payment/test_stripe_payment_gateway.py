from unittest.mock import MagicMock

import pytest
import stripe

from services.payment.domain.enum import PaymentIntentStatus
from services.payment.infrastructure.stripe_payment_gateway import (
    StripePaymentGateway,
)
from services.shared.domain.exception import (
    GatewayRejectedException,
    GatewayUnavailableException,
    ResourceNotFoundException,
)


def _intent(status: str = "succeeded", last_payment_error=None) -> MagicMock:
    return MagicMock(
        id="pi_123",
        client_secret="pi_123_secret_abc",
        status=status,
        last_payment_error=last_payment_error,
    )


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def gateway(client):
    return StripePaymentGateway(api_key="sk_test_dummy", client=client)


class TestStripePaymentGateway:
    def test_create_intent_sends_minor_units_and_metadata(self, gateway, client):
        client.payment_intents.create.return_value = _intent("requires_payment_method")

        intent = gateway.create_intent(
            amount_minor_units=33600,
            currency="USD",
            metadata={"hotelId": "hotel-1", "isSplitPayment": "false"},
        )

        assert intent.intent_id == "pi_123"
        assert intent.client_secret == "pi_123_secret_abc"
        client.payment_intents.create.assert_called_once_with(
            params={
                "amount": 33600,
                "currency": "usd",
                "metadata": {"hotelId": "hotel-1", "isSplitPayment": "false"},
            }
        )

    @pytest.mark.parametrize(
        "stripe_status, expected",
        [
            ("requires_payment_method", PaymentIntentStatus.REQUIRES_PAYMENT),
            ("requires_confirmation", PaymentIntentStatus.REQUIRES_PAYMENT),
            ("requires_action", PaymentIntentStatus.REQUIRES_PAYMENT),
            ("processing", PaymentIntentStatus.PROCESSING),
            ("succeeded", PaymentIntentStatus.SUCCEEDED),
            ("canceled", PaymentIntentStatus.CANCELED),
        ],
    )
    def test_retrieve_intent_maps_status(
        self, gateway, client, stripe_status, expected
    ):
        client.payment_intents.retrieve.return_value = _intent(stripe_status)

        snapshot = gateway.retrieve_intent("pi_123")

        assert snapshot.status == expected
        assert snapshot.is_succeeded is (expected == PaymentIntentStatus.SUCCEEDED)
        client.payment_intents.retrieve.assert_called_once_with("pi_123")

    def test_declined_payment_is_reported_as_failed(self, gateway, client):
        client.payment_intents.retrieve.return_value = _intent(
            "requires_payment_method", last_payment_error={"code": "card_declined"}
        )

        assert gateway.retrieve_intent("pi_123").status == PaymentIntentStatus.FAILED

    def test_unknown_status_is_rejected(self, gateway, client):
        client.payment_intents.retrieve.return_value = _intent("mystery")

        with pytest.raises(GatewayRejectedException):
            gateway.retrieve_intent("pi_123")

    def test_missing_intent_is_not_found(self, gateway, client):
        client.payment_intents.retrieve.side_effect = stripe.InvalidRequestError(
            "No such payment_intent",
            "intent",
            code="resource_missing",
            http_status=404,
        )

        with pytest.raises(
            ResourceNotFoundException, match="Payment intent not found"
        ):
            gateway.retrieve_intent("pi_missing")

    @pytest.mark.parametrize(
        "error",
        [
            stripe.APIConnectionError("timed out"),
            stripe.RateLimitError("slow down"),
            stripe.APIError("server error", http_status=500),
        ],
    )
    def test_transport_errors_are_unavailable(self, gateway, client, error):
        client.payment_intents.create.side_effect = error

        with pytest.raises(GatewayUnavailableException):
            gateway.create_intent(1000, "USD", {})

    @pytest.mark.parametrize(
        "error",
        [
            stripe.AuthenticationError("bad key"),
            stripe.InvalidRequestError(
                "Amount must be at least 50 cents", "amount", http_status=400
            ),
        ],
    )
    def test_client_errors_are_rejected(self, gateway, client, error):
        client.payment_intents.create.side_effect = error

        with pytest.raises(GatewayRejectedException):
            gateway.create_intent(10, "USD", {})
