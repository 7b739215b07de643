from dataclasses import dataclass

from services.payment.domain.enum import PaymentIntentStatus


@dataclass(frozen=True)
class PaymentIntent:
    """作成直後の PaymentIntent（クライアントに渡す secret を含む）"""

    intent_id: str
    client_secret: str

    def __post_init__(self) -> None:
        if not self.intent_id:
            raise ValueError("Payment intent id cannot be empty")


@dataclass(frozen=True)
class PaymentIntentSnapshot:
    """照会時点の PaymentIntent の状態"""

    intent_id: str
    status: PaymentIntentStatus

    @property
    def is_succeeded(self) -> bool:
        return self.status == PaymentIntentStatus.SUCCEEDED
