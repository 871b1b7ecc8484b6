"""Abstract client-side storage for the cart snapshot.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete implementation lives in the
infrastructure layer (a JSON key/value file).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import CartLine


class LocalCartStorage(ABC):

    @abstractmethod
    def load(self) -> list[CartLine]:
        """Return the persisted cart; absent or malformed data is empty."""

    @abstractmethod
    def save(self, lines: list[CartLine]) -> None:
        """Persist the full cart snapshot, replacing the previous one."""
