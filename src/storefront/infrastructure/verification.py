"""Bot-verification token sources for non-browser clients."""

from __future__ import annotations

from storefront.domain.repository.bot_verifier import BotVerifier


class StaticTokenVerifier(BotVerifier):
    """Hands out a pre-issued token once; tokens are single-use."""

    def __init__(self, token: str | None) -> None:
        self._token = (token or "").strip() or None

    def obtain_token(self) -> str | None:
        token, self._token = self._token, None
        return token
