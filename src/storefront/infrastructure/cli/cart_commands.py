"""CLI commands for the shopping cart.

Signed-in shoppers have every change mirrored to their remote cart.
"""

from __future__ import annotations

import click

from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart import UpdateCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_service,
    cart_sync_service,
    catalog_cache,
    current_user_id,
    notifier,
)


def _update_handler() -> tuple[UpdateCartHandler, str | None]:
    user_id = current_user_id()
    sync = cart_sync_service() if user_id else None
    return UpdateCartHandler(cart=cart_service(), sync=sync), user_id


@click.command("show")
def cart_show() -> None:
    """Show the cart with current prices."""
    handler = ShowCartHandler(cart=cart_service(), catalog=catalog_cache())

    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<5} {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*57}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_id:<5} {line.name:<24} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*57}")
    click.echo(f"  {'Items: ' + str(dto.count):<36} {'Total ' + dto.total:>21}")


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--qty", default="1", show_default=True, help="Quantity to add.")
def cart_add(product_id: str, qty: str) -> None:
    """Add a product to the cart."""
    try:
        handler, user_id = _update_handler()
        handler.add(product_id, qty, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    notifier().success(f"Added to cart ({cart_service().count} items).")


@click.command("inc")
@click.option("--id", "product_id", required=True, help="Product ID.")
def cart_inc(product_id: str) -> None:
    """Increase a line's quantity by one."""
    try:
        handler, user_id = _update_handler()
        handler.increment(product_id, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart now holds {cart_service().count} items.")


@click.command("dec")
@click.option("--id", "product_id", required=True, help="Product ID.")
def cart_dec(product_id: str) -> None:
    """Decrease a line's quantity by one (removes it at zero)."""
    try:
        handler, user_id = _update_handler()
        handler.decrement(product_id, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart now holds {cart_service().count} items.")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def cart_remove(product_id: str) -> None:
    """Remove a product from the cart."""
    try:
        handler, user_id = _update_handler()
        handler.remove(product_id, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    notifier().info("Removed from cart.")


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    try:
        handler, user_id = _update_handler()
        handler.clear(user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    notifier().info("Cart cleared.")
