"""Abstract repository for user profiles and their avatars."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.profile import Profile


class ProfileRepository(ABC):

    @abstractmethod
    def get_profile(self, user_id: str) -> Profile | None:
        """Return the user's profile, or None if no row exists yet."""

    @abstractmethod
    def upsert_profile(self, profile: Profile) -> Profile:
        """Insert or update the profile keyed on user id."""

    @abstractmethod
    def upload_avatar(self, user_id: str, filename: str, content: bytes) -> str:
        """Store an avatar image, overwriting any previous one; return its public URL."""
