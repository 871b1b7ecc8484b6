"""Application service: Show Order use cases (queries).

Covers the post-checkout receipt (lookup by order token) and the
signed-in user's order history.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, OrderLineDTO
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_services import OrderLookupService

HISTORY_LIMIT = 50


class ShowOrderHandler:

    def __init__(self, lookup: OrderLookupService) -> None:
        self._lookup = lookup

    def handle(self, order_token: str) -> OrderDTO:
        if not order_token:
            raise ValidationError("Missing token")
        order = self._lookup.get_order_by_token(order_token)
        if order is None:
            raise EntityNotFoundError("Order not found.")
        return to_dto(order)


class ListOrdersHandler:

    def __init__(self, lookup: OrderLookupService) -> None:
        self._lookup = lookup

    def handle(self, user_id: str | None) -> list[OrderDTO]:
        if not user_id:
            raise ValidationError("Please log in.")
        return [to_dto(o) for o in self._lookup.list_orders(user_id, HISTORY_LIMIT)]


def to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.short_id,
        status=order.status,
        created_at=order.created_at,
        items=[
            OrderLineDTO(
                name=li.name,
                quantity=li.qty,
                unit_price=str(Money.of(li.price)),
                line_total=str(Money.of(li.line_total)),
            )
            for li in order.lines
        ],
        total=str(order.display_total),
    )
