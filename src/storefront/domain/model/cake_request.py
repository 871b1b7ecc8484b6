"""CakeRequest: a logged-in shopper's request for a custom cake."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Quantity

DEFAULT_SERVINGS = 8


@dataclass(frozen=True)
class CakeRequest:
    user_id: str
    title: str
    description: str
    servings: int
    due_date: date | None = None

    @staticmethod
    def create(
        user_id: str,
        title: str,
        description: str = "",
        servings: object = DEFAULT_SERVINGS,
        due_date: date | None = None,
    ) -> CakeRequest:
        """Create a request, enforcing the form's rules."""
        if not user_id:
            raise ValidationError("Please log in to request a custom cake.")
        if not title or not title.strip():
            raise ValidationError("A title is required")
        return CakeRequest(
            user_id=user_id,
            title=title.strip(),
            description=(description or "").strip(),
            servings=Quantity.coerce(servings).value,
            due_date=due_date,
        )

    def to_raw(self) -> dict:
        return {
            "user_id": self.user_id,
            "title": self.title,
            "description": self.description,
            "servings": self.servings,
            "due_date": self.due_date.isoformat() if self.due_date else None,
        }
