"""Abstract identity provider (sign-in, sign-up, session events)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from storefront.domain.model.session import Session

SessionCallback = Callable[[str, "Session | None"], None]


class IdentityProvider(ABC):

    @abstractmethod
    def get_session(self) -> Session | None:
        """Return the current session, or None when signed out."""

    @abstractmethod
    def on_session_change(self, callback: SessionCallback) -> Callable[[], None]:
        """Register *callback(event, session)*; return an unsubscribe function."""

    @abstractmethod
    def sign_in_with_password(self, email: str, password: str) -> Session:
        """Authenticate and return the new session."""

    @abstractmethod
    def sign_up(self, email: str, password: str, extra: dict | None = None) -> Session | None:
        """Create an account; returns None when email confirmation is pending."""

    @abstractmethod
    def sign_out(self) -> None:
        """End the current session."""
