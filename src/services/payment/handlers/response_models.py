from __future__ import annotations

from services.booking.handlers.response_models import BookingData
from services.shared.utils.camel_case_model import CamelCaseModel


class ConfirmPaymentResponse(CamelCaseModel):
    """決済完了確認のレスポンスモデル"""

    success: bool = True
    booking: BookingData


class StripeConfigResponse(CamelCaseModel):
    publishable_key: str | None
