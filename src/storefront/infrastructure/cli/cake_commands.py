"""CLI command for custom cake requests."""

from __future__ import annotations

import click

from storefront.application.submit_cake_request import SubmitCakeRequestHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cake_request import DEFAULT_SERVINGS
from storefront.infrastructure.bootstrap import (
    cake_request_repository,
    current_user_id,
    notifier,
)


@click.command("cake-request")
@click.option("--title", required=True, help="What cake would you like?")
@click.option("--description", default="", help="Flavours, decoration, allergies...")
@click.option("--servings", default=DEFAULT_SERVINGS, show_default=True, type=int)
@click.option("--due-date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None)
def cake_request(title: str, description: str, servings: int, due_date) -> None:
    """Request a custom cake (requires login)."""
    try:
        handler = SubmitCakeRequestHandler(cake_request_repository())
        handler.handle(
            user_id=current_user_id(),
            title=title,
            description=description,
            servings=servings,
            due_date=due_date.date() if due_date else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    notifier().success("Your cake request has been submitted!")
