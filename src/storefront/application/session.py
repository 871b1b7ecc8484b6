"""Application service: session lifecycle.

Establishing a session (login or signup) reconciles the local cart with
the user's remote cart.  Session events from the identity provider keep
the loaded profile in step with the signed-in user.  Logging out empties
the local cart so the next user to sign in does not inherit it; the
saved remote cart is left alone.

Partial flows are not rolled back: if signup succeeds and the cart sync
fails, the account exists and the error is reported.
"""

from __future__ import annotations

from collections.abc import Callable

from storefront.application.cart_service import CartService
from storefront.application.notifier import Notifier
from storefront.application.reconcile_cart import ReconcileCartHandler
from storefront.domain.exceptions import CollaboratorError, ValidationError
from storefront.domain.model.profile import Profile
from storefront.domain.model.session import Session
from storefront.domain.repository.identity_provider import IdentityProvider
from storefront.domain.repository.profile_repository import ProfileRepository
from storefront.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)


class SessionService:

    def __init__(
        self,
        identity: IdentityProvider,
        reconcile: ReconcileCartHandler,
        profile_repo: ProfileRepository,
        notifier: Notifier,
        cart: CartService,
    ) -> None:
        self._identity = identity
        self._cart = cart
        self._reconcile = reconcile
        self._profile_repo = profile_repo
        self._notifier = notifier
        self._profile: Profile | None = None
        self._unsubscribe: Callable[[], None] | None = None

    # --- Session events -------------------------------------------------------

    def watch(self) -> None:
        """Follow identity-provider session changes until ``close()``."""
        if self._unsubscribe is None:
            self._unsubscribe = self._identity.on_session_change(self._on_session_change)

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_session_change(self, event: str, session: Session | None) -> None:
        logger.debug("Session event %s", event)
        if session is None:
            self._profile = None
        elif self._profile is None or self._profile.user_id != session.user_id:
            self.load_profile(session.user_id)

    # --- Queries --------------------------------------------------------------

    def current_session(self) -> Session | None:
        return self._identity.get_session()

    def current_user_id(self) -> str | None:
        session = self.current_session()
        return session.user_id if session else None

    @property
    def profile(self) -> Profile | None:
        return self._profile

    def load_profile(self, user_id: str) -> Profile | None:
        """Load the user's profile; failures degrade to no profile."""
        try:
            self._profile = self._profile_repo.get_profile(user_id)
        except CollaboratorError:
            logger.warning(
                "Could not load profile for user %s",
                sanitize_id_for_logging(user_id),
                exc_info=True,
            )
            self._profile = None
        return self._profile

    # --- Commands -------------------------------------------------------------

    def login(self, email: str, password: str) -> Session:
        self._require_credentials(email, password)
        session = self._identity.sign_in_with_password(email.strip(), password)
        logger.info("User %s signed in", sanitize_id_for_logging(session.user_id))

        self._reconcile.handle(session.user_id)
        self.load_profile(session.user_id)
        return session

    def signup(
        self, email: str, password: str, extra: dict | None = None
    ) -> Session | None:
        """Create an account, then sync the cart if a session was issued.

        Returns None when the provider requires email confirmation first.
        """
        self._require_credentials(email, password)
        session = self._identity.sign_up(email.strip(), password, extra or {})

        if session is None:
            self._notifier.info("Check your inbox to confirm your email, then log in.")
            return None

        try:
            self._reconcile.handle(session.user_id)
        except CollaboratorError:
            self._notifier.error("Account created, but your cart could not be saved to it.")
            raise
        self.load_profile(session.user_id)
        self._notifier.success(f"Account created! Welcome, {email.strip()}!")
        return session

    def logout(self) -> None:
        self._identity.sign_out()
        self._cart.clear()
        self._profile = None
        logger.info("Signed out; local cart cleared")

    @staticmethod
    def _require_credentials(email: str, password: str) -> None:
        if not email or not email.strip():
            raise ValidationError("Email is required")
        if not password:
            raise ValidationError("Password is required")
