"""Domain service: Cart Sync.

Moves cart lines between the local cart and the user's remote cart.
It lives in the domain layer because the rules are core business
rules, not just orchestration:

- a merge reads the remote cart, then writes the local lines in one
  upsert; local quantities win and remote-only lines are kept
- a push overwrites remote quantities (conflict key is the
  (user, product) pair), so pushing the same cart twice is a no-op
- a quantity that would fall to zero or below deletes the remote row
- a missing remote row counts as quantity 0

Remote failures propagate unchanged.  Two sessions of the same user can
race; the last write wins.
"""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLine, normalize_lines
from storefront.domain.repository.remote_cart_repository import (
    RemoteCartRepository,
)


class CartSyncService:

    def __init__(self, remote_repo: RemoteCartRepository) -> None:
        self._remote_repo = remote_repo

    def push(self, user_id: str, lines: list[CartLine]) -> int:
        """Upsert every local line into the remote cart.

        Returns the number of lines pushed; an empty cart pushes nothing.
        """
        self._require_user(user_id)
        if not lines:
            return 0
        self._remote_repo.upsert_many(user_id, list(lines))
        return len(lines)

    def pull(self, user_id: str) -> list[CartLine]:
        """Fetch the complete remote cart, normalized like a local replace."""
        self._require_user(user_id)
        return normalize_lines(self._remote_repo.fetch_all(user_id))

    def merge(self, user_id: str, local_lines: list[CartLine]) -> list[CartLine]:
        """Merge the local cart into the remote cart in one write.

        The remote cart is read first, then the local lines are upserted
        in a single request.  Local quantities win; remote-only lines are
        kept after the local ones.  Returns the merged cart, which is what
        the remote cart now holds.  Nothing is written if the read fails,
        and running the merge again with the result changes nothing.
        """
        remote_lines = self.pull(user_id)
        local = normalize_lines(list(local_lines))
        local_ids = {line.product_id for line in local}
        self.push(user_id, local)
        return local + [line for line in remote_lines if line.product_id not in local_ids]

    def bump_quantity(self, user_id: str, product_id: int, delta: int) -> int:
        """Read-modify-write the remote quantity by *delta*.

        Returns the resulting quantity; a result <= 0 removes the row.
        """
        self._require_user(user_id)
        current = self._remote_repo.get_quantity(user_id, product_id) or 0
        result = current + int(delta or 0)
        self._remote_repo.set_quantity(user_id, product_id, result)
        return max(result, 0)

    def remove(self, user_id: str, product_id: int) -> None:
        self._require_user(user_id)
        self._remote_repo.delete_line(user_id, product_id)

    def clear(self, user_id: str) -> None:
        self._require_user(user_id)
        self._remote_repo.delete_all(user_id)

    @staticmethod
    def _require_user(user_id: str) -> None:
        if not user_id:
            raise ValidationError("A signed-in user is required to sync the cart")
