from .payment_intent import PaymentIntent, PaymentIntentSnapshot

__all__ = ["PaymentIntent", "PaymentIntentSnapshot"]
