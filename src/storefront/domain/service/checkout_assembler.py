"""Domain service: Checkout Assembler.

Joins cart lines with catalog products to produce priced, named order
lines and a total.  The join is deliberately lenient: a line whose
product vanished from the catalog is kept, named "Unknown" and priced
at zero, so a stale cart never blocks checkout and never overcharges.

Totals are plain float sums of price * qty; currency rounding belongs
to the order submission service.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from storefront.domain.model.cart import CartLine
from storefront.domain.model.order import UNKNOWN_PRODUCT_NAME, OrderLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import to_number


@dataclass(frozen=True)
class CheckoutSummary:
    lines: tuple[OrderLine, ...]
    total: float

    @property
    def is_empty(self) -> bool:
        return not self.lines


class CheckoutAssembler:

    def assemble(
        self, cart_lines: Iterable[CartLine], products: Iterable[Product]
    ) -> CheckoutSummary:
        """Build order lines in cart order and sum their totals."""
        # String keys tolerate catalogs that mix numeric and string ids
        by_id = {str(p.id): p for p in products}

        order_lines: list[OrderLine] = []
        for line in cart_lines:
            product = by_id.get(str(line.product_id))
            qty = int(to_number(line.qty) or 0)
            if qty <= 0:
                continue
            if product is None:
                name, price = UNKNOWN_PRODUCT_NAME, 0.0
            else:
                name, price = product.name, to_number(product.price) or 0.0
            order_lines.append(
                OrderLine(id=line.product_id, name=name, price=price, qty=qty)
            )

        total = sum((li.price * li.qty for li in order_lines), 0.0)
        return CheckoutSummary(lines=tuple(order_lines), total=total)
