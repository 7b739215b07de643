from collections.abc import Mapping

import stripe

from services.payment.domain.enum import PaymentIntentStatus
from services.payment.domain.gateway import PaymentGateway
from services.payment.domain.value_object import PaymentIntent, PaymentIntentSnapshot
from services.shared.domain.exception import (
    DomainException,
    GatewayRejectedException,
    GatewayUnavailableException,
    ResourceNotFoundException,
)

_STATUS_MAP: dict[str, PaymentIntentStatus] = {
    "requires_payment_method": PaymentIntentStatus.REQUIRES_PAYMENT,
    "requires_confirmation": PaymentIntentStatus.REQUIRES_PAYMENT,
    "requires_action": PaymentIntentStatus.REQUIRES_PAYMENT,
    "processing": PaymentIntentStatus.PROCESSING,
    "requires_capture": PaymentIntentStatus.PROCESSING,
    "succeeded": PaymentIntentStatus.SUCCEEDED,
    "canceled": PaymentIntentStatus.CANCELED,
}


class StripePaymentGateway(PaymentGateway):
    """Stripe PaymentIntents API を使用した PaymentGateway の具象実装

    リトライは行わない（1リクエスト1回の呼び出し）。
    """

    def __init__(
        self,
        api_key: str,
        timeout_seconds: float = 10.0,
        client: stripe.StripeClient | None = None,
    ) -> None:
        self._client = client or stripe.StripeClient(
            api_key,
            http_client=stripe.RequestsClient(timeout=timeout_seconds),
            max_network_retries=0,
        )

    def create_intent(
        self,
        amount_minor_units: int,
        currency: str,
        metadata: Mapping[str, str],
    ) -> PaymentIntent:
        """PaymentIntent を作成する"""
        try:
            intent = self._client.payment_intents.create(
                params={
                    "amount": amount_minor_units,
                    "currency": currency.lower(),
                    "metadata": dict(metadata),
                }
            )
        except stripe.StripeError as e:
            raise _translate_error(e) from e
        return PaymentIntent(intent_id=intent.id, client_secret=intent.client_secret)

    def retrieve_intent(self, intent_id: str) -> PaymentIntentSnapshot:
        """PaymentIntent の状態を照会する"""
        try:
            intent = self._client.payment_intents.retrieve(intent_id)
        except stripe.StripeError as e:
            raise _translate_error(e) from e
        last_payment_error = getattr(intent, "last_payment_error", None)
        return PaymentIntentSnapshot(
            intent_id=intent.id,
            status=_to_status(intent.status, last_payment_error),
        )


def _to_status(stripe_status: str, last_payment_error: object) -> PaymentIntentStatus:
    """Stripe のステータスを PaymentIntentStatus に変換する

    支払いに失敗した PaymentIntent は requires_payment_method に戻り、
    last_payment_error が設定される。
    """
    if stripe_status == "requires_payment_method" and last_payment_error:
        return PaymentIntentStatus.FAILED
    try:
        return _STATUS_MAP[stripe_status]
    except KeyError:
        raise GatewayRejectedException(
            f"Unknown payment intent status: {stripe_status}"
        ) from None


def _translate_error(error: stripe.StripeError) -> DomainException:
    """Stripe SDK の例外をドメイン例外に変換する"""
    if (
        isinstance(error, stripe.InvalidRequestError)
        and error.code == "resource_missing"
    ):
        return ResourceNotFoundException("payment_intent")
    if isinstance(
        error,
        (stripe.APIConnectionError, stripe.RateLimitError, stripe.APIError),
    ):
        return GatewayUnavailableException(f"Payment processor unavailable: {error}")
    if error.http_status is not None and error.http_status >= 500:
        return GatewayUnavailableException(f"Payment processor unavailable: {error}")
    return GatewayRejectedException(f"Payment processor rejected request: {error}")
