"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.cart_service import CartService
from storefront.application.catalog_cache import CatalogCache
from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.model.value_objects import Money
from storefront.domain.service.checkout_assembler import CheckoutAssembler


class ShowCartHandler:

    def __init__(self, cart: CartService, catalog: CatalogCache) -> None:
        self._cart = cart
        self._catalog = catalog

    def handle(self) -> CartDTO:
        summary = CheckoutAssembler().assemble(
            self._cart.lines, self._catalog.get_products()
        )
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_id=int(li.id),
                    name=li.name,
                    quantity=li.qty,
                    unit_price=str(Money.of(li.price)),
                    line_total=str(Money.of(li.line_total)),
                )
                for li in summary.lines
            ],
            count=self._cart.count,
            total=str(Money.of(summary.total)),
        )
