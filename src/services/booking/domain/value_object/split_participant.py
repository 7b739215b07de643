from dataclasses import dataclass

from services.shared.domain import Money


@dataclass(frozen=True)
class SplitParticipant:
    """割り勘の参加者（予約者本人は含まない）"""

    email: str
    amount: Money
    paid: bool = False

    def __post_init__(self) -> None:
        if not self.email or not self.email.strip():
            raise ValueError("Participant email cannot be empty")

    def to_dict(self) -> dict:
        """split_payment_data の participants 要素の形式に変換する"""
        return {
            "email": self.email,
            "amount": str(self.amount.amount),
            "paid": self.paid,
        }
