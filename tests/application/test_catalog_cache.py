"""Tests for the memoized catalog."""

import pytest

from storefront.application.catalog_cache import CatalogCache
from storefront.domain.exceptions import CollaboratorError
from storefront.domain.model.product import Product
from tests.fakes import FakeCatalogProvider

PRODUCTS = [Product(id=1, name="Sourdough", price=10.0), Product(id="2", name="Bun", price=2.0)]


class TestCatalogCache:

    def test_fetches_once(self):
        provider = FakeCatalogProvider(PRODUCTS)
        cache = CatalogCache(provider)
        assert not cache.is_loaded
        cache.get_products()
        cache.get_products()
        assert provider.fetches == 1
        assert cache.is_loaded

    def test_returns_copies(self):
        cache = CatalogCache(FakeCatalogProvider(PRODUCTS))
        cache.get_products().clear()
        assert len(cache.get_products()) == 2

    def test_failure_is_not_cached(self):
        provider = FakeCatalogProvider(PRODUCTS)
        provider.fail = True
        cache = CatalogCache(provider)
        with pytest.raises(CollaboratorError, match="Failed to load products"):
            cache.get_products()
        provider.fail = False
        assert len(cache.get_products()) == 2
        assert provider.fetches == 2

    def test_invalidate_refetches(self):
        provider = FakeCatalogProvider(PRODUCTS)
        cache = CatalogCache(provider)
        cache.get_products()
        cache.invalidate()
        assert not cache.is_loaded
        cache.get_products()
        assert provider.fetches == 2

    def test_get_product_matches_id_as_string(self):
        cache = CatalogCache(FakeCatalogProvider(PRODUCTS))
        assert cache.get_product("1").name == "Sourdough"
        assert cache.get_product(2).name == "Bun"
        assert cache.get_product(99) is None
