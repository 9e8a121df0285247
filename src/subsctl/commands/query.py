"""Commands: show and list subscriptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from subsctl.commands._base import SubsCommand

if TYPE_CHECKING:
    from subsctl.commands._context import AppContext


@click.command(
    cls=SubsCommand,
    examples="""\
  subsctl show 42
  subsctl --json show 42""",
)
@click.argument("subscription_id", type=int)
@click.pass_obj
def show(app: AppContext, subscription_id: int) -> None:
    """Show one subscription by ID."""
    app.emit(app.service.get(subscription_id))


@click.command(
    "list",
    cls=SubsCommand,
    examples="""\
  subsctl list
  subsctl list --user-id 1
  subsctl -q list""",
)
@click.option("--user-id", type=int, default=None, help="Only this user's subscriptions.")
@click.pass_obj
def list_cmd(app: AppContext, user_id: int | None) -> None:
    """List subscriptions, optionally filtered by user."""
    app.emit(app.service.list_subscriptions(user_id=user_id))
