"""Profile: one row per user in the hosted ``profiles`` table."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_ROLE = "user"


@dataclass
class Profile:
    user_id: str
    full_name: str = ""
    phone: str = ""
    avatar_url: str | None = None
    role: str = DEFAULT_ROLE

    def to_raw(self) -> dict:
        # role is managed server-side and never written from the client
        return {
            "user_id": self.user_id,
            "full_name": self.full_name,
            "phone": self.phone,
            "avatar_url": self.avatar_url or None,
        }

    @staticmethod
    def from_raw(raw: Mapping) -> Profile:
        return Profile(
            user_id=str(raw["user_id"]),
            full_name=raw.get("full_name") or "",
            phone=raw.get("phone") or "",
            avatar_url=raw.get("avatar_url") or None,
            role=(raw.get("role") or DEFAULT_ROLE).lower(),
        )
