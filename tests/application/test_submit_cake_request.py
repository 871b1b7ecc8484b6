"""Tests for the custom cake request use case."""

from datetime import date

import pytest

from storefront.application.submit_cake_request import SubmitCakeRequestHandler
from storefront.domain.exceptions import ValidationError
from tests.fakes import FakeCakeRequestRepository


class TestSubmitCakeRequest:

    def test_stores_request(self):
        repo = FakeCakeRequestRepository()
        request = SubmitCakeRequestHandler(repo).handle(
            "u1", "Birthday", "Chocolate", servings=12, due_date=date(2025, 3, 1)
        )
        assert repo.created == [request]
        assert request.to_raw() == {
            "user_id": "u1",
            "title": "Birthday",
            "description": "Chocolate",
            "servings": 12,
            "due_date": "2025-03-01",
        }

    def test_anonymous_rejected(self):
        repo = FakeCakeRequestRepository()
        with pytest.raises(ValidationError, match="log in"):
            SubmitCakeRequestHandler(repo).handle(None, "Birthday")
        assert repo.created == []
