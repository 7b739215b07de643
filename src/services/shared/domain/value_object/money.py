from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        self._assert_same_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: Money) -> Money:
        """金額を減算する（結果が負になる場合は ValueError）"""
        self._assert_same_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def multiply(self, factor: Decimal | int) -> Money:
        """金額に係数を掛ける（丸めは行わない）"""
        return Money(amount=self.amount * Decimal(factor), currency=self.currency)

    def quantize(self) -> Money:
        """最小通貨単位に四捨五入する（ROUND_HALF_UP）"""
        return Money(
            amount=self.amount.quantize(self.currency.minor_unit, ROUND_HALF_UP),
            currency=self.currency,
        )

    def to_minor_units(self) -> int:
        """最小通貨単位の整数値に変換する（USD 12.34 -> 1234）"""
        return int(
            self.quantize().amount.scaleb(self.currency.minor_unit_exponent)
        )

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValueError("Cannot operate on money with different currencies")

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(amount=Decimal(0), currency=currency)

    @classmethod
    def jpy(cls, amount: Decimal) -> Money:
        """日本円で Money を生成"""
        return cls(amount, Currency.jpy())

    @classmethod
    def usd(cls, amount: Decimal) -> Money:
        """米ドルで Money を生成"""
        return cls(amount, Currency.usd())
