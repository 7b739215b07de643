from .payment_intent_status import PaymentIntentStatus

__all__ = ["PaymentIntentStatus"]
