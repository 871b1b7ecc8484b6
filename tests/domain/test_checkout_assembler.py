"""Unit tests for the CheckoutAssembler domain service."""

import pytest

from storefront.domain.model.cart import CartLine
from storefront.domain.model.product import Product
from storefront.domain.service.checkout_assembler import CheckoutAssembler

PRODUCTS = [
    Product(id=1, name="Sourdough", price=10.0),
    Product(id=2, name="Croissant", price=5.5),
]


class TestAssemble:

    def test_lines_and_total(self):
        summary = CheckoutAssembler().assemble(
            [CartLine.of(1, 2), CartLine.of(2, 1)], PRODUCTS
        )
        assert [(li.id, li.name, li.price, li.qty) for li in summary.lines] == [
            (1, "Sourdough", 10.0, 2),
            (2, "Croissant", 5.5, 1),
        ]
        assert summary.total == pytest.approx(25.5)

    def test_keeps_cart_order(self):
        summary = CheckoutAssembler().assemble(
            [CartLine.of(2, 1), CartLine.of(1, 1)], PRODUCTS
        )
        assert [li.id for li in summary.lines] == [2, 1]

    def test_missing_product_is_unknown_and_free(self):
        summary = CheckoutAssembler().assemble(
            [CartLine.of(1, 1), CartLine.of(99, 3)], PRODUCTS
        )
        unknown = summary.lines[1]
        assert unknown.name == "Unknown"
        assert unknown.price == 0.0
        assert unknown.qty == 3
        assert summary.total == pytest.approx(10.0)

    def test_string_ids_in_catalog_match(self):
        products = [Product(id="1", name="Sourdough", price=10.0)]
        summary = CheckoutAssembler().assemble([CartLine.of(1, 1)], products)
        assert summary.lines[0].name == "Sourdough"

    def test_non_numeric_price_counts_as_zero(self):
        products = [Product(id=1, name="Odd", price="n/a")]  # type: ignore[arg-type]
        summary = CheckoutAssembler().assemble([CartLine.of(1, 2)], products)
        assert summary.lines[0].price == 0.0
        assert summary.total == 0.0

    def test_empty_cart(self):
        summary = CheckoutAssembler().assemble([], PRODUCTS)
        assert summary.is_empty
        assert summary.total == 0.0
