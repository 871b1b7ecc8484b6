"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.

Cart data arrives loosely typed (persisted JSON, remote rows, CLI
arguments), so the factories here coerce first and validate second.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError


def to_number(raw: object) -> float | None:
    """Coerce *raw* to a finite float, or None if that is impossible."""
    try:
        number = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def coerce_product_id(raw: object) -> int:
    """Coerce a product identifier to a positive integer.

    Raises ValidationError for anything that is not a whole number >= 1.
    """
    number = to_number(raw)
    if number is None or number != int(number) or number < 1:
        raise ValidationError(f"Invalid product id: {raw!r}")
    return int(number)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that a cart line never holds zero or
    negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def coerce(raw: object) -> Quantity:
        """Lenient factory: non-numeric, non-finite or < 1 falls back to 1."""
        number = to_number(raw)
        if number is None or int(number) < 1:
            return Quantity(1)
        return Quantity(int(number))


_SYMBOLS = {"EUR": "€", "USD": "$", "GBP": "£"}


@dataclass(frozen=True)
class Money:
    """Monetary amount used for display.

    Totals sent to the order submission service stay plain floats; this
    type only formats them for people.
    """

    amount: Decimal
    currency: str = "EUR"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )

    def __str__(self) -> str:
        symbol = _SYMBOLS.get(self.currency, self.currency + " ")
        return f"{symbol}{self.amount:.2f}"

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "EUR") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
