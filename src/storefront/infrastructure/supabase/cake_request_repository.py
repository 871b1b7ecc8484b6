"""Supabase implementation of CakeRequestRepository."""

from __future__ import annotations

from supabase import Client

from storefront.domain.exceptions import CollaboratorError
from storefront.domain.model.cake_request import CakeRequest
from storefront.domain.repository.cake_request_repository import (
    CakeRequestRepository,
)
from storefront.infrastructure.supabase.errors import remote_call

TABLE = "cake_requests"


class SupabaseCakeRequestRepository(CakeRequestRepository):

    def __init__(self, client: Client) -> None:
        self.client = client

    def create(self, request: CakeRequest) -> dict:
        with remote_call("submit cake request"):
            result = self.client.table(TABLE).insert(request.to_raw()).execute()
        if not result.data:
            raise CollaboratorError("Could not submit cake request: no row returned")
        return result.data[0]
