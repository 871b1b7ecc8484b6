"""LocalStorage-backed implementation of LocalCartStorage.

The cart lives under a fixed key as a JSON array of ``{id, qty}``.
There is no schema versioning: anything that does not parse is an
empty cart.
"""

from __future__ import annotations

import json

from storefront.domain.model.cart import CartLine, normalize_lines
from storefront.domain.repository.local_cart_storage import LocalCartStorage
from storefront.infrastructure.persistence.local_storage import LocalStorage

CART_STORAGE_KEY = "cart"


class JsonLocalCartStorage(LocalCartStorage):

    def __init__(self, storage: LocalStorage, key: str = CART_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    def load(self) -> list[CartLine]:
        raw = self._storage.get_item(self._key)
        if raw is None:
            return []
        try:
            return normalize_lines(json.loads(raw))
        except ValueError:
            return []

    def save(self, lines: list[CartLine]) -> None:
        self._storage.set_item(
            self._key, json.dumps([line.to_raw() for line in lines])
        )
