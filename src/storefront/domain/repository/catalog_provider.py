"""Abstract read-only product catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class CatalogProvider(ABC):

    @abstractmethod
    def list_products(self) -> list[Product]:
        """Return every product in the catalog."""
