from .booking_draft import BookingDraft
from .booking_id import BookingId
from .split_participant import SplitParticipant
from .stay_period import StayPeriod

__all__ = ["BookingDraft", "BookingId", "SplitParticipant", "StayPeriod"]
