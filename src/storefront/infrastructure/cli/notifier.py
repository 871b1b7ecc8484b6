"""Terminal implementation of the Notifier capability."""

from __future__ import annotations

import click

from storefront.application.notifier import Notifier


class ClickNotifier(Notifier):

    def success(self, message: str) -> None:
        click.secho(message, fg="green")

    def error(self, message: str) -> None:
        click.secho(message, fg="red", err=True)

    def info(self, message: str) -> None:
        click.echo(message)
