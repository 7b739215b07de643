from enum import Enum


class PaymentStatus(str, Enum):
    """予約の支払いステータス"""

    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"
