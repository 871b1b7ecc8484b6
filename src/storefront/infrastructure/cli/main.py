import click

from storefront.infrastructure.cli.auth_commands import (
    auth_demo,
    auth_login,
    auth_logout,
    auth_signup,
    auth_whoami,
)
from storefront.infrastructure.cli.cake_commands import cake_request
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_dec,
    cart_inc,
    cart_remove,
    cart_show,
)
from storefront.infrastructure.cli.catalog_commands import catalog_list
from storefront.infrastructure.cli.checkout_commands import checkout
from storefront.infrastructure.cli.order_commands import order_history, order_show
from storefront.infrastructure.cli.profile_commands import (
    profile_avatar,
    profile_show,
    profile_update,
)
from storefront.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront: catalog, cart and checkout"""
    configure_logging()


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def catalog() -> None:
    """Browse products."""


@cli.group()
def auth() -> None:
    """Log in, sign up and log out."""


@cli.group()
def order() -> None:
    """View receipts and order history."""


@cli.group()
def profile() -> None:
    """Manage your profile."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_dec)
cart.add_command(cart_inc)
cart.add_command(cart_remove)
cart.add_command(cart_show)
catalog.add_command(catalog_list)
auth.add_command(auth_demo)
auth.add_command(auth_login)
auth.add_command(auth_logout)
auth.add_command(auth_signup)
auth.add_command(auth_whoami)
order.add_command(order_history)
order.add_command(order_show)
profile.add_command(profile_avatar)
profile.add_command(profile_show)
profile.add_command(profile_update)
cli.add_command(checkout)
cli.add_command(cake_request)
