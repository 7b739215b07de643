from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from services.booking.domain.value_object.stay_period import StayPeriod
from services.shared.domain import Currency, Money
from services.shared.domain.exception import ValidationException

TAX_RATE = Decimal("0.12")


@dataclass(frozen=True)
class PriceBreakdown:
    """料金内訳"""

    nights: int
    subtotal: Money
    tax: Money
    total: Money
    per_participant_share: Money | None
    owner_share: Money


def compute_price(
    nightly_rate: Decimal,
    check_in: date,
    check_out: date,
    participant_count: int = 0,
    currency: Currency | None = None,
) -> PriceBreakdown:
    """宿泊料金を計算する（副作用なし）

    - 宿泊数はチェックアウト日 - チェックイン日の日数
    - 税額・各参加者の負担額は最小通貨単位で四捨五入（ROUND_HALF_UP）
    - 割り勘の端数は予約者本人が負担する

    Args:
        nightly_rate: 1泊あたりの料金
        check_in: チェックイン日
        check_out: チェックアウト日
        participant_count: 予約者以外の割り勘参加者数（0 なら割り勘なし）
        currency: 通貨（省略時は USD）

    Raises:
        InvalidRangeException: チェックアウト日がチェックイン日以前の場合
        ValidationException: 参加者の負担額の合計が総額を超える場合
    """
    if participant_count < 0:
        raise ValueError("Participant count cannot be negative")

    nights = StayPeriod(check_in=check_in, check_out=check_out).nights()

    rate = Money(amount=nightly_rate, currency=currency or Currency.usd())
    subtotal = rate.multiply(nights).quantize()
    tax = subtotal.multiply(TAX_RATE).quantize()
    total = subtotal.add(tax)

    if participant_count == 0:
        return PriceBreakdown(
            nights=nights,
            subtotal=subtotal,
            tax=tax,
            total=total,
            per_participant_share=None,
            owner_share=total,
        )

    share = Money(
        amount=total.amount / (participant_count + 1), currency=total.currency
    ).quantize()
    participants_total = share.multiply(participant_count)
    # 切り上げた負担額の合計が総額を超えると予約者の負担額が負になる
    if participants_total.amount > total.amount:
        raise ValidationException(
            "splitEmails",
            f"Total {total} cannot be split among {participant_count + 1} parties",
        )
    return PriceBreakdown(
        nights=nights,
        subtotal=subtotal,
        tax=tax,
        total=total,
        per_participant_share=share,
        owner_share=total.subtract(participants_total),
    )
