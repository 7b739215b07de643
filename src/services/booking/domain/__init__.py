from .entity import Booking
from .enum import BookingStatus, PaymentStatus
from .factory import BookingFactory
from .repository import BookingRepository
from .service import TAX_RATE, PriceBreakdown, compute_price
from .value_object import BookingDraft, BookingId, SplitParticipant, StayPeriod

__all__ = [
    "Booking",
    "BookingDraft",
    "BookingFactory",
    "BookingId",
    "BookingRepository",
    "BookingStatus",
    "PaymentStatus",
    "PriceBreakdown",
    "SplitParticipant",
    "StayPeriod",
    "TAX_RATE",
    "compute_price",
]
