"""Authenticated session as seen by the storefront."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    user_id: str
    email: str | None = None
    access_token: str | None = None
