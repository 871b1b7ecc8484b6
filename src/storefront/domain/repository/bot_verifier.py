"""Abstract source of bot-verification (reCAPTCHA) tokens."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BotVerifier(ABC):

    @abstractmethod
    def obtain_token(self) -> str | None:
        """Return a single-use verification token, or None if unavailable."""
