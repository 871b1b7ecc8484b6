"""Abstract order collaborators: submission and lookup.

Both are hosted services; the storefront only assembles the request
and reads orders back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import CheckoutRequest, Order


class OrderSubmissionService(ABC):

    @abstractmethod
    def submit(self, request: CheckoutRequest) -> str | None:
        """Verify the bot token, persist the order, return its order token."""


class OrderLookupService(ABC):

    @abstractmethod
    def get_order_by_token(self, token: str) -> Order | None:
        """Return the order created with *token*, or None."""

    @abstractmethod
    def list_orders(self, user_id: str, limit: int = 50) -> list[Order]:
        """Return the user's orders, newest first."""
