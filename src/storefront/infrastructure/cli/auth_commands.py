"""CLI commands for signing in and out."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_service,
    notifier,
    session_service,
    settings,
)


@click.command("login")
@click.option("--email", required=True, help="Account email.")
@click.password_option("--password", confirmation_prompt=False, help="Account password.")
def auth_login(email: str, password: str) -> None:
    """Log in and merge the local cart into your saved cart."""
    try:
        session = session_service().login(email, password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    notifier().success(f"Logged in as {session.email or email}.")
    click.echo(f"Cart: {cart_service().count} items.")


@click.command("demo")
def auth_demo() -> None:
    """Log in with the configured demo account."""
    try:
        email, password = settings().require_demo_credentials()
        session = session_service().login(email, password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    notifier().success(f"Logged in as {session.email or email} (demo).")
    click.echo(f"Cart: {cart_service().count} items.")


@click.command("signup")
@click.option("--email", required=True, help="Account email.")
@click.password_option("--password", help="Choose a password.")
@click.option("--full-name", default="", help="Name stored with the account.")
def auth_signup(email: str, password: str, full_name: str) -> None:
    """Create an account and save the current cart to it."""
    extra = {"full_name": full_name.strip()} if full_name.strip() else {}
    try:
        session_service().signup(email, password, extra)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("logout")
def auth_logout() -> None:
    """Log out and empty the local cart (your saved cart is kept)."""
    try:
        session_service().logout()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    notifier().info("Logged out.")


@click.command("whoami")
def auth_whoami() -> None:
    """Show the signed-in user."""
    try:
        session = session_service().current_session()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if session is None:
        click.echo("Not logged in.")
        return
    click.echo(f"{session.email} ({session.user_id})")
