"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money, Quantity, format_rupiah


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("25000"))
        assert m.amount == Decimal("25000")
        assert m.currency == "IDR"

    def test_of_factory_from_int(self):
        assert Money.of(5000).amount == Decimal("5000")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("lima ribu")

    @pytest.mark.parametrize("raw", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="finite number"):
            Money.of(raw)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of(-1)

    def test_addition(self):
        assert Money.of(25000) + Money.of(5000) == Money.of(30000)

    def test_multiplication_by_int(self):
        assert Money.of(15000) * 3 == Money.of(45000)

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of(15000) * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "IDR") + Money(Decimal("5"), "USD")

    def test_str_is_rupiah(self):
        assert str(Money.of(25000)) == "Rp 25.000"

    def test_zero(self):
        assert Money.zero() == Money.of(0)


class TestFormatRupiah:

    def test_thousands_separator(self):
        assert format_rupiah(1250000) == "Rp 1.250.000"

    def test_small_amount(self):
        assert format_rupiah(500) == "Rp 500"

    def test_fraction_rounds_half_up(self):
        assert format_rupiah(Decimal("2500.5")) == "Rp 2.501"

    def test_negative(self):
        assert format_rupiah(-5000) == "-Rp 5.000"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)

    def test_increment(self):
        assert Quantity(2).increment() == Quantity(3)
