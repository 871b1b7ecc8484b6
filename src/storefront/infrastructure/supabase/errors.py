"""Classification of Supabase failures into domain exceptions.

PostgREST answers a ``.single()`` query that matched no rows with error
code PGRST116.  That is a normal empty result for profiles and cart
rows, so callers check ``is_not_found`` before treating an error as a
failure.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import httpx
from supabase import AuthError, FunctionsError, PostgrestAPIError, StorageException

from storefront.domain.exceptions import AuthenticationError, CollaboratorError
from storefront.logging import get_logger

logger = get_logger(__name__)

NOT_FOUND_CODE = "PGRST116"

REMOTE_ERRORS = (
    PostgrestAPIError,
    FunctionsError,
    StorageException,
    httpx.HTTPError,
)


def is_not_found(exc: Exception) -> bool:
    return getattr(exc, "code", None) == NOT_FOUND_CODE


@contextmanager
def remote_call(action: str) -> Iterator[None]:
    """Re-raise remote failures as CollaboratorError naming *action*."""
    try:
        yield
    except REMOTE_ERRORS as exc:
        logger.error("Supabase call failed: %s (%s)", action, exc)
        message = getattr(exc, "message", None) or str(exc)
        raise CollaboratorError(f"Could not {action}: {message}") from exc


def auth_error_message(exc: Exception) -> str:
    """Map an auth failure to a message fit for the shopper."""
    msg = (getattr(exc, "message", None) or str(exc) or "").lower()
    status = getattr(exc, "status", None)

    if status == 400 and ("invalid" in msg or "credentials" in msg):
        return "Incorrect email or password."
    if "not confirmed" in msg:
        return "Please confirm your email before logging in."
    if status == 422 or "validation" in msg:
        return "Invalid email or password format."
    if status == 429 or "rate" in msg:
        return "Too many attempts. Please try again in a moment."
    return "Failed to login. Please try again."


@contextmanager
def auth_call(action: str) -> Iterator[None]:
    """Re-raise identity-provider failures as AuthenticationError."""
    try:
        yield
    except (AuthError, httpx.HTTPError) as exc:
        logger.warning("Auth call failed: %s (%s)", action, exc)
        raise AuthenticationError(auth_error_message(exc)) from exc
