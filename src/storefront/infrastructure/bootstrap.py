"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Shared objects (local storage, the Supabase client, the cart, the
catalog cache) are created once per process; ``reset()`` drops them.
"""

from __future__ import annotations

from functools import cache

from supabase import Client

from storefront.application.cart_service import CartService
from storefront.application.catalog_cache import CatalogCache
from storefront.application.notifier import Notifier
from storefront.application.reconcile_cart import ReconcileCartHandler
from storefront.application.session import SessionService
from storefront.domain.service.cart_sync_service import CartSyncService
from storefront.infrastructure.cli.notifier import ClickNotifier
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_cart_storage import (
    JsonLocalCartStorage,
)
from storefront.infrastructure.persistence.json_catalog_provider import (
    JsonCatalogProvider,
)
from storefront.infrastructure.persistence.local_storage import LocalStorage
from storefront.infrastructure.supabase.cake_request_repository import (
    SupabaseCakeRequestRepository,
)
from storefront.infrastructure.supabase.client import create_supabase_client
from storefront.infrastructure.supabase.identity_provider import (
    SupabaseIdentityProvider,
)
from storefront.infrastructure.supabase.order_services import (
    SupabaseOrderLookupService,
    SupabaseOrderSubmissionService,
)
from storefront.infrastructure.supabase.profile_repository import (
    SupabaseProfileRepository,
)
from storefront.infrastructure.supabase.remote_cart_repository import (
    SupabaseRemoteCartRepository,
)
from storefront.infrastructure.verification import StaticTokenVerifier


@cache
def settings() -> Settings:
    return Settings.from_env()


@cache
def local_storage() -> LocalStorage:
    return LocalStorage(settings().state_file)


@cache
def notifier() -> Notifier:
    return ClickNotifier()


@cache
def cart_service() -> CartService:
    return CartService(JsonLocalCartStorage(local_storage()))


@cache
def catalog_cache() -> CatalogCache:
    return CatalogCache(JsonCatalogProvider(settings().catalog_file))


# --- Hosted collaborators -----------------------------------------------------


@cache
def supabase_client() -> Client:
    return create_supabase_client(settings(), local_storage())


def is_online() -> bool:
    """True when Supabase credentials are configured."""
    return bool(settings().supabase_url and settings().supabase_anon_key)


def cart_sync_service() -> CartSyncService:
    return CartSyncService(SupabaseRemoteCartRepository(supabase_client()))


def profile_repository() -> SupabaseProfileRepository:
    return SupabaseProfileRepository(supabase_client())


def order_submission_service() -> SupabaseOrderSubmissionService:
    return SupabaseOrderSubmissionService(supabase_client())


def order_lookup_service() -> SupabaseOrderLookupService:
    return SupabaseOrderLookupService(supabase_client())


def cake_request_repository() -> SupabaseCakeRequestRepository:
    return SupabaseCakeRequestRepository(supabase_client())


def bot_verifier(token: str | None = None) -> StaticTokenVerifier:
    return StaticTokenVerifier(token or settings().captcha_token)


@cache
def session_service() -> SessionService:
    service = SessionService(
        identity=SupabaseIdentityProvider(supabase_client()),
        reconcile=ReconcileCartHandler(cart_service(), cart_sync_service()),
        profile_repo=profile_repository(),
        notifier=notifier(),
        cart=cart_service(),
    )
    service.watch()
    return service


def current_user_id() -> str | None:
    """The signed-in user's id; always None when running offline."""
    if not is_online():
        return None
    return session_service().current_user_id()


def reset() -> None:
    """Forget every cached object (tests, or after changing the environment)."""
    if session_service.cache_info().currsize:
        session_service().close()
    for factory in (
        settings,
        local_storage,
        notifier,
        cart_service,
        catalog_cache,
        supabase_client,
        session_service,
    ):
        factory.cache_clear()
