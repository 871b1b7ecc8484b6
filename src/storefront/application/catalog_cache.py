"""Application service: memoized catalog access.

The first successful fetch is kept and shared by every caller holding
this cache.  Failed fetches are not cached.  ``invalidate()`` drops the
memoized catalog so the next read fetches again.
"""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.repository.catalog_provider import CatalogProvider
from storefront.logging import get_logger

logger = get_logger(__name__)


class CatalogCache:

    def __init__(self, provider: CatalogProvider) -> None:
        self._provider = provider
        self._products: list[Product] | None = None

    @property
    def is_loaded(self) -> bool:
        return self._products is not None

    def get_products(self) -> list[Product]:
        if self._products is None:
            products = self._provider.list_products()
            logger.info("Catalog loaded (%d products)", len(products))
            self._products = products
        return list(self._products)

    def get_product(self, product_id: object) -> Product | None:
        for product in self.get_products():
            if str(product.id) == str(product_id):
                return product
        return None

    def invalidate(self) -> None:
        self._products = None
