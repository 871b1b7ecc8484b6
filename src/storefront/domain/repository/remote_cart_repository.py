"""Abstract per-user remote cart, keyed by (user, product)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import CartLine


class RemoteCartRepository(ABC):

    @abstractmethod
    def upsert_many(self, user_id: str, lines: list[CartLine]) -> None:
        """Write every line, overwriting the quantity of existing rows."""

    @abstractmethod
    def fetch_all(self, user_id: str) -> list[CartLine]:
        """Return the user's complete remote cart."""

    @abstractmethod
    def get_quantity(self, user_id: str, product_id: int) -> int | None:
        """Return the stored quantity, or None if there is no row."""

    @abstractmethod
    def set_quantity(self, user_id: str, product_id: int, qty: int) -> None:
        """Store an exact quantity; ``qty <= 0`` deletes the row."""

    @abstractmethod
    def delete_line(self, user_id: str, product_id: int) -> None:
        """Delete one (user, product) row if present."""

    @abstractmethod
    def delete_all(self, user_id: str) -> None:
        """Delete every row belonging to the user."""
