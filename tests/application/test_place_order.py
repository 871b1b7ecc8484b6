"""Integration tests for the PlaceOrder use case.

Uses in-memory fakes (no network).
"""

import pytest

from storefront.application.cart_service import CartService
from storefront.application.catalog_cache import CatalogCache
from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import CheckoutError, CollaboratorError, ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.order import Shipping
from storefront.domain.model.product import Product
from tests.fakes import (
    FakeBotVerifier,
    FakeCatalogProvider,
    FakeLocalCartStorage,
    FakeOrderSubmissionService,
)

PRODUCTS = [
    Product(id=1, name="Sourdough", price=10.0),
    Product(id=2, name="Croissant", price=5.5),
]


def _setup(
    lines: list[CartLine] | None = None,
    token: str | None = "captcha-ok",
    order_token: str | None = "tok-123",
) -> tuple[PlaceOrderHandler, CartService, FakeOrderSubmissionService]:
    if lines is None:
        lines = [CartLine.of(1, 2), CartLine.of(2, 1)]
    cart = CartService(FakeLocalCartStorage(lines))
    submission = FakeOrderSubmissionService(order_token)
    handler = PlaceOrderHandler(
        cart=cart,
        catalog=CatalogCache(FakeCatalogProvider(PRODUCTS)),
        verifier=FakeBotVerifier(token),
        submission=submission,
    )
    return handler, cart, submission


class TestPlaceOrderHappyPath:

    def test_user_checkout(self):
        handler, cart, submission = _setup()
        dto = handler.handle(user_id="u1")

        assert dto.order_token == "tok-123"
        assert dto.total == "€25.50"
        assert dto.line_count == 2
        assert cart.is_empty

        payload = submission.submitted[0].to_payload()
        assert payload["user_id"] == "u1"
        assert payload["guest_email"] is None
        assert payload["shipping"] is None
        assert payload["status"] == "created"
        assert payload["total"] == pytest.approx(25.5)
        assert payload["token"] == "captcha-ok"
        assert [line["qty"] for line in payload["lines"]] == [2, 1]

    def test_guest_checkout(self):
        handler, cart, submission = _setup()
        handler.handle(
            user_id=None,
            guest_email="ann@example.com",
            guest_name="Ann",
            shipping=Shipping("1 Main St", "Paris", "75001"),
        )
        payload = submission.submitted[0].to_payload()
        assert payload["user_id"] is None
        assert payload["guest_email"] == "ann@example.com"
        assert payload["guest_name"] == "Ann"
        assert payload["shipping"]["city"] == "Paris"
        assert cart.is_empty

    def test_unknown_product_is_submitted_at_zero(self):
        handler, _, submission = _setup(lines=[CartLine.of(1, 1), CartLine.of(42, 2)])
        dto = handler.handle(user_id="u1")
        lines = submission.submitted[0].to_payload()["lines"]
        assert lines[1] == {"id": 42, "name": "Unknown", "price": 0.0, "qty": 2}
        assert dto.total == "€10.00"


class TestPlaceOrderValidation:

    def test_guest_without_email(self):
        handler, cart, submission = _setup()
        with pytest.raises(ValidationError, match="email to continue as guest"):
            handler.handle(user_id=None, guest_email="  ")
        assert submission.submitted == []
        assert cart.count == 3

    def test_empty_cart(self):
        handler, _, submission = _setup(lines=[])
        with pytest.raises(ValidationError, match="Your cart is empty"):
            handler.handle(user_id="u1")
        assert submission.submitted == []

    def test_missing_verification_token(self):
        handler, cart, submission = _setup(token=None)
        with pytest.raises(ValidationError, match="reCAPTCHA"):
            handler.handle(user_id="u1")
        assert submission.submitted == []
        assert not cart.is_empty


class TestPlaceOrderFailures:

    def test_no_order_token_keeps_cart(self):
        handler, cart, _ = _setup(order_token=None)
        with pytest.raises(CheckoutError, match="no order token"):
            handler.handle(user_id="u1")
        assert cart.count == 3

    def test_submission_failure_keeps_cart(self):
        handler, cart, submission = _setup()
        submission.fail = True
        with pytest.raises(CollaboratorError):
            handler.handle(user_id="u1")
        assert cart.count == 3
