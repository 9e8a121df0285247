"""Click base classes with ``--examples`` support.

``--help`` stays short; ``--examples`` prints sample invocations and exits.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

import click


def _attach_examples(cmd: click.Command, examples: str) -> None:
    def _show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=_show,
            help="Show usage examples.",
        )
    )


class SubsCommand(click.Command):
    """Command that accepts an ``examples`` keyword."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _attach_examples(self, examples)


class IsoDateTime(click.ParamType):
    """ISO 8601 timestamp. Naive values are read as UTC downstream."""

    name = "datetime"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, datetime):
            return value
        try:
            return datetime.fromisoformat(str(value))
        except ValueError:
            self.fail(f"{value!r} is not an ISO 8601 timestamp", param, ctx)


ISO_DATETIME = IsoDateTime()
