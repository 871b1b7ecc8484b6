"""CLI command for placing an order."""

from __future__ import annotations

import click

from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import Shipping
from storefront.infrastructure.bootstrap import (
    bot_verifier,
    cart_service,
    catalog_cache,
    current_user_id,
    notifier,
    order_submission_service,
)


@click.command("checkout")
@click.option("--email", "guest_email", default="", help="Contact email (guest checkout).")
@click.option("--name", "guest_name", default="", help="Full name (guest, optional).")
@click.option("--address", default="", help="Shipping address (guest).")
@click.option("--city", default="", help="Shipping city (guest).")
@click.option("--zip", "zip_code", default="", help="Shipping ZIP (guest).")
@click.option(
    "--captcha-token",
    default=None,
    help="reCAPTCHA token; defaults to STOREFRONT_CAPTCHA_TOKEN.",
)
def checkout(
    guest_email: str,
    guest_name: str,
    address: str,
    city: str,
    zip_code: str,
    captcha_token: str | None,
) -> None:
    """Place an order for the current cart."""
    try:
        user_id = current_user_id()
        handler = PlaceOrderHandler(
            cart=cart_service(),
            catalog=catalog_cache(),
            verifier=bot_verifier(captcha_token),
            submission=order_submission_service(),
        )
        dto = handler.handle(
            user_id=user_id,
            guest_email=guest_email,
            guest_name=guest_name,
            shipping=Shipping(address=address, city=city, zip=zip_code),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    notifier().success(f"Order placed! {dto.line_count} lines, total {dto.total}.")
    click.echo(f"Order token: {dto.order_token}")
