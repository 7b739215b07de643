from pydantic import Field

from services.shared.utils.camel_case_model import CamelCaseModel


class ConfirmPaymentRequest(CamelCaseModel):
    """決済完了確認リクエストモデル"""

    payment_intent_id: str = Field(
        ...,
        min_length=1,
        description="Stripe PaymentIntent ID",
        examples=["pi_3Nk0000000000000"],
    )
