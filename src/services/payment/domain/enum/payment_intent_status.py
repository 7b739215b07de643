from enum import Enum


class PaymentIntentStatus(str, Enum):
    """決済代行サービス側の PaymentIntent ステータス"""

    REQUIRES_PAYMENT = "requires_payment"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"
