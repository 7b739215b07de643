from datetime import date

from pydantic import EmailStr, Field, field_validator, model_validator

from services.shared.utils import to_id_string
from services.shared.utils.camel_case_model import CamelCaseModel


class CreateBookingRequest(CamelCaseModel):
    """予約作成リクエストモデル

    割り勘参加者は splitEmails、または splitPaymentData.participants[].email
    のどちらでも受け付ける（金額はサーバー側で計算するため無視する）。
    """

    hotel_id: str = Field(..., min_length=1)
    room_id: str = Field(..., min_length=1)
    check_in_date: date = Field(
        ...,
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2024-06-01"],
    )
    check_out_date: date = Field(
        ...,
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2024-06-04"],
    )
    guest_count: int = Field(..., ge=1, description="宿泊人数")
    special_requests: str | None = Field(default=None, max_length=2000)
    is_split_payment: bool = False
    split_emails: list[EmailStr] = Field(default_factory=list)

    @field_validator("hotel_id", "room_id", mode="before")
    @classmethod
    def convert_id_to_string(cls, v: object) -> object:
        return to_id_string(v)

    @model_validator(mode="before")
    @classmethod
    def collect_split_emails(cls, data: object) -> object:
        if not isinstance(data, dict):
            return data

        emails = data.get("splitEmails", data.get("split_emails"))
        if emails is None:
            split_payment_data = data.get("splitPaymentData")
            participants = (
                split_payment_data.get("participants") or []
                if isinstance(split_payment_data, dict)
                else []
            )
            emails = [p.get("email") for p in participants if isinstance(p, dict)]
        if not isinstance(emails, list):
            return data

        cleaned = [e.strip() if isinstance(e, str) else e for e in emails]
        data = {
            k: v for k, v in data.items() if k not in ("splitEmails", "split_emails")
        }
        data["splitEmails"] = [e for e in cleaned if e]
        return data
