"""Commands: cancel and expire subscriptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from subsctl.commands._base import SubsCommand

if TYPE_CHECKING:
    from subsctl.commands._context import AppContext


@click.command(
    cls=SubsCommand,
    examples="""\
  subsctl cancel 42
  subsctl --json cancel 42""",
)
@click.argument("subscription_id", type=int)
@click.pass_obj
def cancel(app: AppContext, subscription_id: int) -> None:
    """Cancel an ACTIVE subscription by ID."""
    app.emit(app.service.cancel(subscription_id))


@click.command(
    cls=SubsCommand,
    examples="""\
  subsctl expire 42
  subsctl --json expire 42""",
)
@click.argument("subscription_id", type=int)
@click.pass_obj
def expire(app: AppContext, subscription_id: int) -> None:
    """Expire a subscription now (sets its expiration to the current time)."""
    app.emit(app.service.expire(subscription_id))
