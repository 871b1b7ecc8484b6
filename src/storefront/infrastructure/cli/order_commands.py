"""CLI commands for receipts and order history."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import current_user_id, order_lookup_service


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    if dto.created_at:
        click.echo(f"Created: {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<24} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Total':<30} {dto.total:>20}")


@click.command("show")
@click.option("--token", "order_token", required=True, help="Order token from checkout.")
def order_show(order_token: str) -> None:
    """Show the receipt for an order."""
    try:
        handler = ShowOrderHandler(lookup=order_lookup_service())
        dto = handler.handle(order_token)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("history")
def order_history() -> None:
    """List your most recent orders."""
    try:
        handler = ListOrdersHandler(lookup=order_lookup_service())
        orders = handler.handle(current_user_id())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders yet.")
        return

    click.echo(f"{'Order':<10} {'Created':<26} {'Status':<10} {'Total':>10}")
    click.echo("-" * 59)
    for dto in orders:
        click.echo(f"{dto.id:<10} {dto.created_at:<26} {dto.status:<10} {dto.total:>10}")
