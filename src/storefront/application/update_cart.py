"""Application service: Update Cart use cases.

Anonymous shoppers only touch the local cart.  With a signed-in user the
same change is applied to the remote cart first, then locally, so a
remote failure leaves both carts as they were.
"""

from __future__ import annotations

from storefront.application.cart_service import CartService
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Quantity, coerce_product_id
from storefront.domain.service.cart_sync_service import CartSyncService


class UpdateCartHandler:

    def __init__(self, cart: CartService, sync: CartSyncService | None = None) -> None:
        self._cart = cart
        self._sync = sync

    def add(self, product_id: object, qty: object = 1, user_id: str | None = None) -> None:
        pid = coerce_product_id(product_id)
        quantity = Quantity.coerce(qty)
        remote = self._remote(user_id)
        if remote:
            remote.bump_quantity(user_id, pid, quantity.value)
        self._cart.add_item(pid, quantity.value)

    def increment(self, product_id: object, user_id: str | None = None) -> None:
        pid = coerce_product_id(product_id)
        remote = self._remote(user_id)
        if remote and self._cart.quantity_of(pid):
            remote.bump_quantity(user_id, pid, 1)
        self._cart.increment(pid)

    def decrement(self, product_id: object, user_id: str | None = None) -> None:
        pid = coerce_product_id(product_id)
        remote = self._remote(user_id)
        if remote and self._cart.quantity_of(pid):
            remote.bump_quantity(user_id, pid, -1)
        self._cart.decrement(pid)

    def remove(self, product_id: object, user_id: str | None = None) -> None:
        pid = coerce_product_id(product_id)
        remote = self._remote(user_id)
        if remote:
            remote.remove(user_id, pid)
        self._cart.remove(pid)

    def clear(self, user_id: str | None = None) -> None:
        remote = self._remote(user_id)
        if remote:
            remote.clear(user_id)
        self._cart.clear()

    def _remote(self, user_id: str | None) -> CartSyncService | None:
        if not user_id:
            return None
        if self._sync is None:
            raise ValidationError("Remote cart sync is not configured")
        return self._sync
