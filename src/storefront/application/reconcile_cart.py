"""Application service: Reconcile Cart use case.

Runs when a session is established (login or signup):

1. merge the local lines into the user's remote cart (one read, then
   one upsert; local quantities win, remote-only lines are kept)
2. replace the local cart with the merged cart

Afterwards both carts hold the same lines.  If the merge fails the
error propagates and neither cart has changed: the local cart is only
replaced once the remote write has succeeded.
"""

from __future__ import annotations

from storefront.application.cart_service import CartService
from storefront.domain.model.cart import CartLine
from storefront.domain.service.cart_sync_service import CartSyncService
from storefront.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)


class ReconcileCartHandler:

    def __init__(self, cart: CartService, sync: CartSyncService) -> None:
        self._cart = cart
        self._sync = sync

    def handle(self, user_id: str) -> list[CartLine]:
        local_count = len(self._cart.lines)
        merged = self._sync.merge(user_id, list(self._cart.lines))

        self._cart.replace_all(merged)
        logger.info(
            "Cart reconciled for user %s: %d local, %d merged lines",
            sanitize_id_for_logging(user_id),
            local_count,
            len(merged),
        )
        return merged
