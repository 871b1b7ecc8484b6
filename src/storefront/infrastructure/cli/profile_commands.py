"""CLI commands for the user profile."""

from __future__ import annotations

from pathlib import Path

import click

from storefront.application.manage_profile import ShowProfileHandler, UpdateProfileHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    notifier,
    profile_repository,
    session_service,
)


def _signed_in() -> tuple[str | None, str | None]:
    session = session_service().current_session()
    if session is None:
        return None, None
    return session.user_id, session.email


@click.command("show")
def profile_show() -> None:
    """Show your profile."""
    try:
        user_id, email = _signed_in()
        profile = ShowProfileHandler(profile_repository()).handle(user_id, email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Name:   {profile.full_name}")
    click.echo(f"Phone:  {profile.phone}")
    click.echo(f"Role:   {profile.role.upper()}")
    click.echo(f"Avatar: {profile.avatar_url or '(default)'}")


@click.command("update")
@click.option("--full-name", default=None, help="Full name.")
@click.option("--phone", default=None, help="Phone number.")
@click.option("--avatar-url", default=None, help="Avatar URL (empty for the default).")
def profile_update(full_name: str | None, phone: str | None, avatar_url: str | None) -> None:
    """Update your profile."""
    try:
        user_id, _ = _signed_in()
        UpdateProfileHandler(profile_repository()).handle(
            user_id, full_name=full_name, phone=phone, avatar_url=avatar_url
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    notifier().success("Saved.")


@click.command("avatar")
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def profile_avatar(image: Path) -> None:
    """Upload a new avatar image."""
    try:
        user_id, _ = _signed_in()
        profile = UpdateProfileHandler(profile_repository()).upload_avatar(
            user_id, image.name, image.read_bytes()
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    notifier().success(f"Avatar updated: {profile.avatar_url}")
