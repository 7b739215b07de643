from .booking_status import BookingStatus
from .payment_status import PaymentStatus

__all__ = ["BookingStatus", "PaymentStatus"]
