"""Supabase implementation of ProfileRepository.

Profiles live in the ``profiles`` table (one row per user_id); avatars
live in the public ``avatars`` storage bucket at ``<user_id>/avatar.<ext>``.
"""

from __future__ import annotations

import mimetypes
from pathlib import PurePath

from supabase import Client, PostgrestAPIError

from storefront.domain.exceptions import CollaboratorError
from storefront.domain.model.profile import Profile
from storefront.domain.repository.profile_repository import ProfileRepository
from storefront.infrastructure.supabase.errors import is_not_found, remote_call

TABLE = "profiles"
BUCKET = "avatars"
AVATAR_CACHE_SECONDS = "3600"


class SupabaseProfileRepository(ProfileRepository):

    def __init__(self, client: Client) -> None:
        self.client = client

    def get_profile(self, user_id: str) -> Profile | None:
        if not user_id:
            return None
        with remote_call("load profile"):
            try:
                result = (
                    self.client.table(TABLE)
                    .select("*")
                    .eq("user_id", user_id)
                    .single()
                    .execute()
                )
            except PostgrestAPIError as exc:
                if is_not_found(exc):
                    return None
                raise
        return Profile.from_raw(result.data) if result.data else None

    def upsert_profile(self, profile: Profile) -> Profile:
        with remote_call("save profile"):
            result = (
                self.client.table(TABLE)
                .upsert(profile.to_raw(), on_conflict="user_id")
                .execute()
            )
        if not result.data:
            raise CollaboratorError("Could not save profile: no row returned")
        return Profile.from_raw(result.data[0])

    def upload_avatar(self, user_id: str, filename: str, content: bytes) -> str:
        ext = (PurePath(filename).suffix.lstrip(".") or "png").lower()
        path = f"{user_id}/avatar.{ext}"
        content_type = mimetypes.guess_type(f"avatar.{ext}")[0] or "image/png"

        bucket = self.client.storage.from_(BUCKET)
        with remote_call("upload avatar"):
            bucket.upload(
                path,
                content,
                {
                    "upsert": "true",
                    "cache-control": AVATAR_CACHE_SECONDS,
                    "content-type": content_type,
                },
            )
        return bucket.get_public_url(path)
