"""Application service: profile use cases.

The role column is managed server-side; demo accounts are read-only.
"""

from __future__ import annotations

from pathlib import PurePath

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.profile import Profile
from storefront.domain.repository.profile_repository import ProfileRepository

DEMO_ROLE = "demo"


class ShowProfileHandler:

    def __init__(self, profile_repo: ProfileRepository) -> None:
        self._profile_repo = profile_repo

    def handle(self, user_id: str | None, email: str | None = None) -> Profile:
        """Return the stored profile, or defaults derived from the email."""
        if not user_id:
            raise ValidationError("Please log in.")
        profile = self._profile_repo.get_profile(user_id)
        if profile is None:
            profile = Profile(user_id=user_id, full_name=_name_from_email(email))
        return profile


class UpdateProfileHandler:

    def __init__(self, profile_repo: ProfileRepository) -> None:
        self._profile_repo = profile_repo

    def handle(
        self,
        user_id: str | None,
        full_name: str | None = None,
        phone: str | None = None,
        avatar_url: str | None = None,
    ) -> Profile:
        """Upsert the fields that were given, keeping the rest as stored."""
        current = self._editable_profile(user_id)
        if full_name is not None:
            current.full_name = full_name.strip()
        if phone is not None:
            current.phone = phone.strip()
        if avatar_url is not None:
            current.avatar_url = avatar_url.strip() or None
        return self._profile_repo.upsert_profile(current)

    def upload_avatar(self, user_id: str | None, filename: str, content: bytes) -> Profile:
        """Store a new avatar image and point the profile at it."""
        current = self._editable_profile(user_id)
        if not content:
            raise ValidationError("Avatar file is empty")
        url = self._profile_repo.upload_avatar(
            current.user_id, PurePath(filename).name, content
        )
        current.avatar_url = url
        return self._profile_repo.upsert_profile(current)

    def _editable_profile(self, user_id: str | None) -> Profile:
        if not user_id:
            raise ValidationError("Please log in.")
        current = self._profile_repo.get_profile(user_id) or Profile(user_id=user_id)
        if current.role == DEMO_ROLE:
            raise ValidationError("Demo accounts cannot change their profile.")
        return current


def _name_from_email(email: str | None) -> str:
    return (email or "").split("@")[0]
