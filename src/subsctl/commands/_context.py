"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. The database and service are built lazily so
``--help`` and ``--version`` never touch storage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from subsctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from subsctl.config.settings import SubsSettings
    from subsctl.plugins.event_bus import EventBus
    from subsctl.services.result import ServiceResult
    from subsctl.services.subscription import SubscriptionService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SubsSettings) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        self._service: SubscriptionService | None = None

        from subsctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> SubscriptionService:
        """The subscription service (wired on first access)."""
        if self._service is None:
            from subsctl.domain.clock import SystemClock
            from subsctl.domain.mapping import CreateSubscriptionMapper
            from subsctl.domain.validation import CreateSubscriptionValidator
            from subsctl.infrastructure.database.engine import init_database
            from subsctl.infrastructure.repositories.subscription import SubscriptionRepository
            from subsctl.services.subscription import SubscriptionService

            self._engine = init_database(
                self.settings.db_path,
                echo=self.settings.database.echo,
            )
            self._service = SubscriptionService(
                SubscriptionRepository(self._engine),
                CreateSubscriptionMapper(),
                CreateSubscriptionValidator(),
                SystemClock(),
                event_bus=self._build_event_bus(),
            )
        return self._service

    def _build_event_bus(self) -> EventBus | None:
        if not self.settings.plugins.enabled:
            return None

        from subsctl.plugins.event_bus import EventBus
        from subsctl.plugins.manager import PluginManager

        pm = PluginManager()
        pm.discover_and_load()
        return EventBus(pm)

    def close(self) -> None:
        """Release the database engine, if one was created."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._service = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
