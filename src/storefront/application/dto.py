"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the shopper."""

    product_id: int
    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "€5.50"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    count: int
    total: str


@dataclass(frozen=True)
class PlacedOrderDTO:
    """Output: what the shopper needs after a successful checkout."""

    order_token: str
    total: str
    line_count: int


@dataclass(frozen=True)
class OrderLineDTO:
    name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order receipt or history entry."""

    id: str
    status: str
    created_at: str
    items: list[OrderLineDTO]
    total: str
