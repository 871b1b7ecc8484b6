"""Supabase client construction."""

from __future__ import annotations

from supabase import Client, create_client
from supabase.client import ClientOptions

from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.local_storage import LocalStorage


def create_supabase_client(settings: Settings, storage: LocalStorage) -> Client:
    """Create a sync client whose auth session persists in local storage.

    Token refresh happens lazily in ``auth.get_session()``; no background
    refresh timer is started for a short-lived CLI process.
    """
    url, key = settings.require_supabase()
    options = ClientOptions(
        storage=storage,
        persist_session=True,
        auto_refresh_token=False,
    )
    return create_client(url, key, options=options)
