"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.bootstrap import catalog_cache


@click.command("list")
@click.option("--category", default=None, help="Only show this category.")
def catalog_list(category: str | None) -> None:
    """List all products in the catalog."""
    try:
        products = catalog_cache().get_products()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if category:
        products = [p for p in products if p.category.lower() == category.lower()]

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<28} {'Category':<14} {'Price':>10}")
    click.echo("-" * 61)
    for p in products:
        click.echo(
            f"{str(p.id):<6} {p.name:<28} {p.category:<14} {str(Money.of(p.price)):>10}"
        )
