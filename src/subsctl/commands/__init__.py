"""Subcommand modules for subsctl.

Provides register_commands(), which imports command modules lazily so
``subsctl --help`` does not pull in SQLAlchemy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every subcommand on the root CLI group."""
    from subsctl.commands.create import create
    from subsctl.commands.delete import delete
    from subsctl.commands.lifecycle import cancel, expire
    from subsctl.commands.query import list_cmd, show

    cli.add_command(create)
    cli.add_command(cancel)
    cli.add_command(expire)
    cli.add_command(show)
    cli.add_command(list_cmd)
    cli.add_command(delete)
