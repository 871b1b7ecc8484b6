"""Supabase implementations of the order collaborators.

Submission goes through the ``checkout`` edge function, which verifies
the reCAPTCHA token and inserts the order with the service role.
Receipts are read through the ``get_order_by_token`` RPC so guests can
see their order without table access.
"""

from __future__ import annotations

from supabase import Client

from storefront.domain.exceptions import CheckoutError
from storefront.domain.model.order import CheckoutRequest, Order
from storefront.domain.repository.order_services import (
    OrderLookupService,
    OrderSubmissionService,
)
from storefront.infrastructure.supabase.errors import REMOTE_ERRORS, remote_call
from storefront.logging import get_logger

logger = get_logger(__name__)

CHECKOUT_FUNCTION = "checkout"
ORDER_BY_TOKEN_RPC = "get_order_by_token"
ORDERS_TABLE = "orders"


class SupabaseOrderSubmissionService(OrderSubmissionService):

    def __init__(self, client: Client) -> None:
        self.client = client

    def submit(self, request: CheckoutRequest) -> str | None:
        try:
            response = self.client.functions.invoke(
                CHECKOUT_FUNCTION,
                invoke_options={"body": request.to_payload(), "responseType": "json"},
            )
        except REMOTE_ERRORS as exc:
            logger.error("Checkout function failed: %s", exc)
            message = getattr(exc, "message", None) or "Failed to place order."
            raise CheckoutError(message) from exc

        if not isinstance(response, dict):
            return None
        return response.get("order_token") or None


class SupabaseOrderLookupService(OrderLookupService):

    def __init__(self, client: Client) -> None:
        self.client = client

    def get_order_by_token(self, token: str) -> Order | None:
        with remote_call("load order"):
            result = self.client.rpc(ORDER_BY_TOKEN_RPC, {"p_token": token}).execute()
        # the RPC returns a set of rows
        rows = result.data or []
        if isinstance(rows, dict):
            rows = [rows]
        return Order.from_raw(rows[0]) if rows else None

    def list_orders(self, user_id: str, limit: int = 50) -> list[Order]:
        with remote_call("load orders"):
            result = (
                self.client.table(ORDERS_TABLE)
                .select("id, created_at, status, total, lines")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .limit(limit)
                .execute()
            )
        return [Order.from_raw(row) for row in result.data or []]
