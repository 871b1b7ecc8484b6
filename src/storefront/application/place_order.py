"""Application service: Place Order use case.

Works the same for registered users and guests:

1. Assemble priced lines from the cart and the catalog.
2. Validate locally: guest email, non-empty cart, verification token.
   Nothing is sent if any check fails.
3. Submit to the order submission service; no order token means failure.
4. Clear the local cart (the remote saved cart is left alone).
"""

from __future__ import annotations

from storefront.application.cart_service import CartService
from storefront.application.catalog_cache import CatalogCache
from storefront.application.dto import PlacedOrderDTO
from storefront.domain.exceptions import CheckoutError, ValidationError
from storefront.domain.model.order import CheckoutRequest, Shipping
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.bot_verifier import BotVerifier
from storefront.domain.repository.order_services import OrderSubmissionService
from storefront.domain.service.checkout_assembler import CheckoutAssembler
from storefront.logging import get_logger

logger = get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        cart: CartService,
        catalog: CatalogCache,
        verifier: BotVerifier,
        submission: OrderSubmissionService,
    ) -> None:
        self._cart = cart
        self._catalog = catalog
        self._verifier = verifier
        self._submission = submission

    def handle(
        self,
        user_id: str | None,
        guest_email: str = "",
        guest_name: str = "",
        shipping: Shipping | None = None,
    ) -> PlacedOrderDTO:
        summary = CheckoutAssembler().assemble(
            self._cart.lines, self._catalog.get_products()
        )

        if not user_id and not (guest_email or "").strip():
            raise ValidationError("Please provide an email to continue as guest.")
        if summary.is_empty:
            raise ValidationError("Your cart is empty.")

        token = self._verifier.obtain_token()
        if not token:
            raise ValidationError("Failed to verify reCAPTCHA.")

        if user_id:
            request = CheckoutRequest.for_user(
                user_id, list(summary.lines), summary.total, token
            )
        else:
            request = CheckoutRequest.for_guest(
                guest_email,
                guest_name,
                shipping or Shipping(),
                list(summary.lines),
                summary.total,
                token,
            )

        order_token = self._submission.submit(request)
        if not order_token:
            raise CheckoutError("Checkout completed but no order token returned.")

        self._cart.clear()
        logger.info(
            "Order placed (%s checkout, %d lines)",
            "guest" if request.is_guest else "user",
            len(summary.lines),
        )
        return PlacedOrderDTO(
            order_token=order_token,
            total=str(Money.of(summary.total)),
            line_count=len(summary.lines),
        )
