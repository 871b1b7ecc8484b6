"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import (
    Money,
    Quantity,
    coerce_product_id,
    to_number,
)


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "EUR"

    def test_of_factory_from_float(self):
        assert Money.of(25.5) == Money.of("25.50")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_display_only_no_arithmetic(self):
        with pytest.raises(TypeError):
            Money.of("10") + Money.of("5.50")  # type: ignore[operator]

    def test_non_decimal_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.0)  # type: ignore[arg-type]

    def test_str_formatting(self):
        assert str(Money.of("25.5")) == "€25.50"
        assert str(Money.of("3", "USD")) == "$3.00"
        assert str(Money.of("1.234", "CHF")) == "CHF 1.23"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(2.5)  # type: ignore[arg-type]

    @pytest.mark.parametrize("raw, expected", [
        (3, 3),
        ("4", 4),
        (2.9, 2),
        (0, 1),
        (-5, 1),
        ("abc", 1),
        (None, 1),
        (float("inf"), 1),
        (float("nan"), 1),
    ])
    def test_coerce(self, raw, expected):
        assert Quantity.coerce(raw).value == expected


# ── Product ids ──────────────────────────────────────────────────────────────


class TestCoerceProductId:

    def test_int(self):
        assert coerce_product_id(7) == 7

    def test_numeric_string(self):
        assert coerce_product_id("12") == 12

    def test_whole_float(self):
        assert coerce_product_id(3.0) == 3

    @pytest.mark.parametrize("raw", [0, -1, 1.5, "x", None, float("inf")])
    def test_invalid_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid product id"):
            coerce_product_id(raw)


class TestToNumber:

    def test_values(self):
        assert to_number("2.5") == 2.5
        assert to_number(None) is None
        assert to_number("nope") is None
        assert to_number(float("nan")) is None
