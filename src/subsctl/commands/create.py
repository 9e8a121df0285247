"""Command: create or replace a subscription."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from subsctl.commands._base import ISO_DATETIME, SubsCommand

if TYPE_CHECKING:
    from subsctl.commands._context import AppContext


@click.command(
    cls=SubsCommand,
    examples="""\
  subsctl create --user-id 1 --name Premium --provider GOOGLE --expires 2030-01-01T00:00:00
  subsctl --json create --user-id 7 --name Family --provider APPLE --expires 2031-06-30""",
)
@click.option("--user-id", type=int, default=None, help="Owning user id.")
@click.option("--name", default=None, help="Display name.")
@click.option("--provider", default=None, help="Provider name, e.g. GOOGLE or APPLE.")
@click.option("--expires", type=ISO_DATETIME, default=None, help="Expiration (ISO 8601, UTC).")
@click.pass_obj
def create(
    app: AppContext,
    user_id: int | None,
    name: str | None,
    provider: str | None,
    expires: datetime | None,
) -> None:
    """Validate and store a new ACTIVE subscription.

    Missing or invalid fields are reported together, with their codes.
    """
    from subsctl.domain.subscription import CreateSubscriptionRequest

    request = CreateSubscriptionRequest(
        user_id=user_id,
        name=name,
        provider=provider,
        expiration_date=expires,
    )
    app.emit(app.service.upsert(request))
