"""Cart aggregate: the shopper's cart lines.

The Cart owns its lines and enforces the two cart invariants:

- at most one CartLine per product id
- no line ever holds a quantity below 1
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Quantity, coerce_product_id


@dataclass(frozen=True)
class CartLine:
    """One (product, quantity) pairing in a cart."""

    product_id: int
    quantity: Quantity

    @property
    def qty(self) -> int:
        return self.quantity.value

    def to_raw(self) -> dict:
        return {"id": self.product_id, "qty": self.quantity.value}

    @staticmethod
    def of(product_id: object, qty: object = 1) -> CartLine:
        return CartLine(coerce_product_id(product_id), Quantity.coerce(qty))


def normalize_lines(raw: object) -> list[CartLine]:
    """Normalize loosely-typed line data into valid CartLines.

    Accepts CartLines or ``{"id": ..., "qty": ...}`` mappings.  Anything
    that is not a list or tuple normalizes to an empty cart; entries
    without a usable product id are dropped; duplicate ids accumulate
    into a single line, keeping the position of the first occurrence.
    """
    if not isinstance(raw, (list, tuple)):
        return []

    merged: dict[int, int] = {}
    for entry in raw:
        if isinstance(entry, CartLine):
            line = entry
        elif isinstance(entry, Mapping):
            try:
                line = CartLine.of(entry.get("id"), entry.get("qty"))
            except ValidationError:
                continue
        else:
            continue
        merged[line.product_id] = merged.get(line.product_id, 0) + line.qty

    return [CartLine(pid, Quantity(qty)) for pid, qty in merged.items()]


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Line order is insertion order; it is kept for display and for the
    order of lines in a checkout payload.
    """

    lines: list[CartLine] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add(self, product_id: int, quantity: Quantity) -> None:
        """Add *quantity* units, accumulating onto an existing line."""
        for i, line in enumerate(self.lines):
            if line.product_id == product_id:
                self.lines[i] = CartLine(
                    product_id, Quantity(line.qty + quantity.value)
                )
                return
        self.lines.append(CartLine(product_id, quantity))

    def increment(self, product_id: int) -> None:
        for i, line in enumerate(self.lines):
            if line.product_id == product_id:
                self.lines[i] = CartLine(product_id, Quantity(line.qty + 1))
                return

    def decrement(self, product_id: int) -> None:
        """Take one unit away; a line at quantity 1 is removed."""
        for i, line in enumerate(self.lines):
            if line.product_id == product_id:
                if line.qty > 1:
                    self.lines[i] = CartLine(product_id, Quantity(line.qty - 1))
                else:
                    del self.lines[i]
                return

    def remove(self, product_id: int) -> None:
        self.lines = [line for line in self.lines if line.product_id != product_id]

    def clear(self) -> None:
        self.lines = []

    def replace_all(self, lines: object) -> None:
        """Substitute the whole cart with a normalized copy of *lines*."""
        if isinstance(lines, (list, tuple)):
            self.lines = normalize_lines(lines)
        else:
            self.lines = []

    # --- Computed properties --------------------------------------------------

    @property
    def count(self) -> int:
        return sum(line.qty for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def quantity_of(self, product_id: int) -> int:
        for line in self.lines:
            if line.product_id == product_id:
                return line.qty
        return 0

    def to_raw(self) -> list[dict]:
        return [line.to_raw() for line in self.lines]
