"""Application service: the in-process Cart API.

Wraps the Cart aggregate with write-through persistence.  Every
mutation saves the post-mutation snapshot before returning, so what a
reader sees is always what is on disk.  A failed write is logged and
otherwise ignored: the in-memory cart stays correct and the shopper is
never blocked by storage trouble.
"""

from __future__ import annotations

from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import Quantity, coerce_product_id
from storefront.domain.repository.local_cart_storage import LocalCartStorage
from storefront.logging import get_logger

logger = get_logger(__name__)


class CartService:

    def __init__(self, storage: LocalCartStorage) -> None:
        self._storage = storage
        self._cart = Cart(list(storage.load()))

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._cart.lines)

    @property
    def count(self) -> int:
        return self._cart.count

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    def quantity_of(self, product_id: object) -> int:
        return self._cart.quantity_of(coerce_product_id(product_id))

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product_id: object, qty: object = 1) -> None:
        self._cart.add(coerce_product_id(product_id), Quantity.coerce(qty))
        self._persist()

    def increment(self, product_id: object) -> None:
        self._cart.increment(coerce_product_id(product_id))
        self._persist()

    def decrement(self, product_id: object) -> None:
        self._cart.decrement(coerce_product_id(product_id))
        self._persist()

    def remove(self, product_id: object) -> None:
        self._cart.remove(coerce_product_id(product_id))
        self._persist()

    def clear(self) -> None:
        self._cart.clear()
        self._persist()

    def replace_all(self, lines: object) -> None:
        self._cart.replace_all(lines)
        self._persist()

    # --- Internal helpers -----------------------------------------------------

    def _persist(self) -> None:
        try:
            self._storage.save(list(self._cart.lines))
        except OSError:
            logger.warning("Could not persist cart snapshot", exc_info=True)
