"""Supabase Auth implementation of IdentityProvider."""

from __future__ import annotations

from collections.abc import Callable

from supabase import Client

from storefront.domain.exceptions import AuthenticationError
from storefront.domain.model.session import Session
from storefront.domain.repository.identity_provider import (
    IdentityProvider,
    SessionCallback,
)
from storefront.infrastructure.supabase.errors import auth_call


class SupabaseIdentityProvider(IdentityProvider):

    def __init__(self, client: Client) -> None:
        self.client = client

    def get_session(self) -> Session | None:
        with auth_call("get session"):
            session = self.client.auth.get_session()
        return self._to_domain(session)

    def on_session_change(self, callback: SessionCallback) -> Callable[[], None]:
        def listener(event, session) -> None:
            callback(str(event), self._to_domain(session))

        subscription = self.client.auth.on_auth_state_change(listener)
        return subscription.unsubscribe

    def sign_in_with_password(self, email: str, password: str) -> Session:
        with auth_call("sign in"):
            response = self.client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        session = self._to_domain(response.session)
        if session is None:
            # Supabase returns no session for unconfirmed accounts
            raise AuthenticationError("Please confirm your email before logging in.")
        return session

    def sign_up(self, email: str, password: str, extra: dict | None = None) -> Session | None:
        with auth_call("sign up"):
            response = self.client.auth.sign_up(
                {"email": email, "password": password, "options": {"data": extra or {}}}
            )
        return self._to_domain(response.session)

    def sign_out(self) -> None:
        with auth_call("sign out"):
            self.client.auth.sign_out()

    @staticmethod
    def _to_domain(session) -> Session | None:
        if session is None or session.user is None:
            return None
        return Session(
            user_id=str(session.user.id),
            email=session.user.email,
            access_token=session.access_token,
        )
