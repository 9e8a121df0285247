"""Command: delete a subscription row."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from subsctl.commands._base import SubsCommand

if TYPE_CHECKING:
    from subsctl.commands._context import AppContext


@click.command(
    cls=SubsCommand,
    examples="""\
  subsctl delete 42""",
)
@click.argument("subscription_id", type=int)
@click.pass_obj
def delete(app: AppContext, subscription_id: int) -> None:
    """Delete a subscription by ID, whatever its status.

    Deleting an unknown ID succeeds with ``deleted: False``.
    """
    app.emit(app.service.delete(subscription_id))
