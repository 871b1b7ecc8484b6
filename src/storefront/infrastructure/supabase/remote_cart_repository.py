"""Supabase implementation of RemoteCartRepository.

Table ``cart_items`` has a UNIQUE constraint on (user_id, product_id),
which is what makes upserts overwrite instead of duplicating.
"""

from __future__ import annotations

from supabase import Client, PostgrestAPIError

from storefront.domain.model.cart import CartLine
from storefront.domain.repository.remote_cart_repository import (
    RemoteCartRepository,
)
from storefront.infrastructure.supabase.errors import is_not_found, remote_call

TABLE = "cart_items"
ON_CONFLICT = "user_id,product_id"


class SupabaseRemoteCartRepository(RemoteCartRepository):

    def __init__(self, client: Client) -> None:
        self.client = client

    def upsert_many(self, user_id: str, lines: list[CartLine]) -> None:
        rows = [self._to_row(user_id, line.product_id, line.qty) for line in lines]
        if not rows:
            return
        with remote_call("sync cart"):
            self.client.table(TABLE).upsert(rows, on_conflict=ON_CONFLICT).execute()

    def fetch_all(self, user_id: str) -> list[CartLine]:
        with remote_call("load cart"):
            result = (
                self.client.table(TABLE)
                .select("product_id, qty")
                .eq("user_id", user_id)
                .execute()
            )
        return [
            CartLine.of(row["product_id"], row["qty"]) for row in result.data or []
        ]

    def get_quantity(self, user_id: str, product_id: int) -> int | None:
        with remote_call("read cart quantity"):
            try:
                result = (
                    self.client.table(TABLE)
                    .select("qty")
                    .eq("user_id", user_id)
                    .eq("product_id", product_id)
                    .single()
                    .execute()
                )
            except PostgrestAPIError as exc:
                if is_not_found(exc):
                    return None
                raise
        data = result.data or {}
        qty = data.get("qty")
        return int(qty) if qty is not None else None

    def set_quantity(self, user_id: str, product_id: int, qty: int) -> None:
        if qty <= 0:
            self.delete_line(user_id, product_id)
            return
        with remote_call("update cart quantity"):
            (
                self.client.table(TABLE)
                .upsert([self._to_row(user_id, product_id, qty)], on_conflict=ON_CONFLICT)
                .execute()
            )

    def delete_line(self, user_id: str, product_id: int) -> None:
        with remote_call("remove cart line"):
            (
                self.client.table(TABLE)
                .delete()
                .eq("user_id", user_id)
                .eq("product_id", product_id)
                .execute()
            )

    def delete_all(self, user_id: str) -> None:
        with remote_call("clear cart"):
            self.client.table(TABLE).delete().eq("user_id", user_id).execute()

    @staticmethod
    def _to_row(user_id: str, product_id: int, qty: int) -> dict:
        return {"user_id": user_id, "product_id": int(product_id), "qty": int(qty)}
