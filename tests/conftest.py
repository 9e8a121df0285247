"""Shared pytest fixtures and test helpers for subsctl tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from subsctl.domain.clock import FixedClock
from subsctl.domain.mapping import CreateSubscriptionMapper
from subsctl.domain.subscription import MAX_INSTANT, CreateSubscriptionRequest, Subscription
from subsctl.domain.types import Provider, SubscriptionStatus
from subsctl.domain.validation import CreateSubscriptionValidator
from subsctl.infrastructure.database.engine import init_database
from subsctl.infrastructure.repositories.subscription import SubscriptionRepository
from subsctl.services.subscription import SubscriptionService

NOW = datetime(2026, 3, 14, 9, 26, 53, tzinfo=UTC)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path / "subsctl.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def repository(db_engine: Engine) -> SubscriptionRepository:
    return SubscriptionRepository(db_engine)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def service(repository: SubscriptionRepository, clock: FixedClock) -> SubscriptionService:
    """Service wired to a real SQLite repository and a frozen clock."""
    return SubscriptionService(
        repository,
        CreateSubscriptionMapper(),
        CreateSubscriptionValidator(),
        clock,
    )


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory with no config overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_root")``.
    """
    monkeypatch.delenv("SUBSCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_subscription(user_id: int = 1, **overrides: Any) -> Subscription:
    """An unsaved ACTIVE subscription for *user_id*."""
    fields: dict[str, Any] = {
        "user_id": user_id,
        "name": "Ivan",
        "provider": Provider.GOOGLE,
        "expiration_date": MAX_INSTANT,
        "status": SubscriptionStatus.ACTIVE,
    }
    fields.update(overrides)
    return Subscription(**fields)


def make_request(**overrides: Any) -> CreateSubscriptionRequest:
    """A request that passes validation unless overridden."""
    fields: dict[str, Any] = {
        "user_id": 1,
        "name": "Ivan",
        "provider": "GOOGLE",
        "expiration_date": MAX_INSTANT,
    }
    fields.update(overrides)
    return CreateSubscriptionRequest(**fields)
