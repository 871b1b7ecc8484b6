"""Abstract repository for custom cake requests."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cake_request import CakeRequest


class CakeRequestRepository(ABC):

    @abstractmethod
    def create(self, request: CakeRequest) -> dict:
        """Persist a new request and return the stored row."""
