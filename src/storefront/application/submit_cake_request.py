"""Application service: Submit Cake Request use case."""

from __future__ import annotations

from datetime import date

from storefront.domain.model.cake_request import DEFAULT_SERVINGS, CakeRequest
from storefront.domain.repository.cake_request_repository import (
    CakeRequestRepository,
)


class SubmitCakeRequestHandler:

    def __init__(self, repo: CakeRequestRepository) -> None:
        self._repo = repo

    def handle(
        self,
        user_id: str | None,
        title: str,
        description: str = "",
        servings: object = DEFAULT_SERVINGS,
        due_date: date | None = None,
    ) -> CakeRequest:
        request = CakeRequest.create(
            user_id=user_id or "",
            title=title,
            description=description,
            servings=servings,
            due_date=due_date,
        )
        self._repo.create(request)
        return request
