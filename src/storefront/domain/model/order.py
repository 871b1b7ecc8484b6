"""Order-side models: checkout lines, the submission request and receipts.

An OrderLine snapshots a product's name and price at submission time.
Authoritative total re-computation is the order submission service's
job; the values here are what the shopper saw.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, to_number

UNKNOWN_PRODUCT_NAME = "Unknown"
ORDER_STATUS_CREATED = "created"


@dataclass(frozen=True)
class OrderLine:
    id: int | str
    name: str
    price: float
    qty: int

    @property
    def line_total(self) -> float:
        return self.price * self.qty

    def to_raw(self) -> dict:
        return {"id": self.id, "name": self.name, "price": self.price, "qty": self.qty}

    @staticmethod
    def from_raw(raw: Mapping) -> OrderLine:
        return OrderLine(
            id=raw.get("id"),
            name=str(raw.get("name") or ""),
            price=to_number(raw.get("price")) or 0.0,
            qty=int(to_number(raw.get("qty")) or 0),
        )


@dataclass(frozen=True)
class Shipping:
    address: str = ""
    city: str = ""
    zip: str = ""

    def to_raw(self) -> dict:
        return {
            "address": self.address.strip(),
            "city": self.city.strip(),
            "zip": self.zip.strip(),
        }


@dataclass(frozen=True)
class CheckoutRequest:
    """Everything the order submission service needs for one order.

    Use ``for_user()`` or ``for_guest()``; they enforce which contact
    fields belong to which kind of checkout.
    """

    user_id: str | None
    guest_email: str | None
    guest_name: str | None
    shipping: Shipping | None
    lines: tuple[OrderLine, ...]
    total: float
    token: str
    status: str = ORDER_STATUS_CREATED

    @staticmethod
    def for_user(
        user_id: str, lines: list[OrderLine], total: float, token: str
    ) -> CheckoutRequest:
        return CheckoutRequest(
            user_id=user_id,
            guest_email=None,
            guest_name=None,
            shipping=None,
            lines=tuple(lines),
            total=total,
            token=token,
        )

    @staticmethod
    def for_guest(
        email: str,
        name: str | None,
        shipping: Shipping,
        lines: list[OrderLine],
        total: float,
        token: str,
    ) -> CheckoutRequest:
        if not email or not email.strip():
            raise ValidationError("Please provide an email to continue as guest.")
        return CheckoutRequest(
            user_id=None,
            guest_email=email.strip(),
            guest_name=(name or "").strip() or None,
            shipping=shipping,
            lines=tuple(lines),
            total=total,
            token=token,
        )

    @property
    def is_guest(self) -> bool:
        return self.user_id is None

    def to_payload(self) -> dict:
        return {
            "user_id": self.user_id,
            "guest_email": self.guest_email,
            "guest_name": self.guest_name,
            "shipping": self.shipping.to_raw() if self.shipping else None,
            "status": self.status,
            "total": self.total,
            "lines": [line.to_raw() for line in self.lines],
            "token": self.token,
        }


@dataclass(frozen=True)
class Order:
    """A persisted order as read back for receipts and history."""

    id: str
    status: str
    total: float
    lines: tuple[OrderLine, ...] = field(default_factory=tuple)
    created_at: str = ""
    order_token: str | None = None

    @property
    def short_id(self) -> str:
        return self.id[:8]

    @property
    def display_total(self) -> Money:
        return Money.of(self.total)

    @staticmethod
    def from_raw(raw: Mapping) -> Order:
        return Order(
            id=str(raw.get("id") or ""),
            status=str(raw.get("status") or ""),
            total=to_number(raw.get("total")) or 0.0,
            lines=tuple(OrderLine.from_raw(li) for li in raw.get("lines") or []),
            created_at=str(raw.get("created_at") or ""),
            order_token=raw.get("order_token"),
        )
