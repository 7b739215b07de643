from decimal import Decimal

import pytest

from services.shared.domain import Currency, Money


class TestCurrency:
    def test_code_is_normalized_to_upper_case(self):
        assert Currency("usd").code == "USD"

    def test_unsupported_currency_raises_error(self):
        with pytest.raises(ValueError, match="Unsupported currency"):
            Currency("XYZ")

    def test_minor_unit(self):
        assert Currency.usd().minor_unit == Decimal("0.01")
        assert Currency.jpy().minor_unit == Decimal("1")


class TestMoney:
    def test_negative_amount_raises_error(self):
        with pytest.raises(ValueError, match="Amount cannot be negative"):
            Money.usd(Decimal("-0.01"))

    def test_add_and_subtract(self):
        total = Money.usd(Decimal("300.00")).add(Money.usd(Decimal("36.00")))
        assert total == Money.usd(Decimal("336.00"))
        assert total.subtract(Money.usd(Decimal("36.00"))).amount == Decimal("300.00")

    def test_different_currencies_cannot_be_added(self):
        with pytest.raises(ValueError, match="different currencies"):
            Money.usd(Decimal("1")).add(Money.jpy(Decimal("1")))

    def test_subtract_below_zero_raises_error(self):
        with pytest.raises(ValueError):
            Money.usd(Decimal("1.00")).subtract(Money.usd(Decimal("2.00")))

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("0.125"), Decimal("0.13")),
            (Decimal("0.124"), Decimal("0.12")),
            (Decimal("84.005"), Decimal("84.01")),
        ],
    )
    def test_quantize_rounds_half_up(self, amount, expected):
        assert Money.usd(amount).quantize().amount == expected

    def test_to_minor_units(self):
        assert Money.usd(Decimal("336.00")).to_minor_units() == 33600
        assert Money.usd(Decimal("12.345")).to_minor_units() == 1235
        assert Money.jpy(Decimal("30000")).to_minor_units() == 30000
