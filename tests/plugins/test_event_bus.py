"""Tests for EventBus dispatch and service warnings."""

from __future__ import annotations

import pytest

from subsctl.domain.clock import FixedClock
from subsctl.domain.mapping import CreateSubscriptionMapper
from subsctl.domain.validation import CreateSubscriptionValidator
from subsctl.infrastructure.repositories.subscription import SubscriptionRepository
from subsctl.plugins.event_bus import EventBus
from subsctl.plugins.hookspecs import hookimpl
from subsctl.plugins.manager import PluginManager
from subsctl.services.subscription import SubscriptionService
from tests.conftest import NOW, make_request


class _Collector:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, object]]] = []

    @hookimpl
    def post_upsert(self, subscription_id: int, user_id: int, provider: str, status: str) -> None:
        self.events.append(
            (
                "post_upsert",
                {
                    "subscription_id": subscription_id,
                    "user_id": user_id,
                    "provider": provider,
                    "status": status,
                },
            )
        )

    @hookimpl
    def post_cancel(self, subscription_id: int, user_id: int) -> None:
        self.events.append(("post_cancel", {"subscription_id": subscription_id}))

    @hookimpl
    def post_expire(self, subscription_id: int, user_id: int, expired_at: str) -> None:
        self.events.append(("post_expire", {"expired_at": expired_at}))

    @hookimpl
    def post_delete(self, subscription_id: int) -> None:
        self.events.append(("post_delete", {"subscription_id": subscription_id}))


class _Broken:
    @hookimpl
    def post_cancel(self, subscription_id: int, user_id: int) -> None:
        raise RuntimeError("plugin exploded")


@pytest.fixture
def collector() -> _Collector:
    return _Collector()


@pytest.fixture
def plugin_manager(collector: _Collector) -> PluginManager:
    pm = PluginManager()
    pm.register_plugin(collector)
    return pm


@pytest.fixture
def wired_service(
    repository: SubscriptionRepository, plugin_manager: PluginManager
) -> SubscriptionService:
    return SubscriptionService(
        repository,
        CreateSubscriptionMapper(),
        CreateSubscriptionValidator(),
        FixedClock(NOW),
        event_bus=EventBus(plugin_manager),
    )


class TestDispatch:
    def test_dispatch_success(self, plugin_manager: PluginManager, collector: _Collector) -> None:
        bus = EventBus(plugin_manager)

        assert bus.dispatch("post_delete", {"subscription_id": 4}) is True
        assert collector.events == [("post_delete", {"subscription_id": 4})]

    def test_unknown_hook_is_ignored(self, plugin_manager: PluginManager) -> None:
        assert EventBus(plugin_manager).dispatch("post_nothing", {}) is True

    def test_plugin_error_returns_false(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_Broken())

        ok = EventBus(pm).dispatch("post_cancel", {"subscription_id": 1, "user_id": 1})

        assert ok is False


class TestServiceEvents:
    def test_lifecycle_events_in_order(
        self, wired_service: SubscriptionService, collector: _Collector
    ) -> None:
        created = wired_service.upsert(make_request(provider="APPLE"))
        sub_id = created.data["subscription"]["id"]
        wired_service.cancel(sub_id)
        wired_service.expire(sub_id)
        wired_service.delete(sub_id)

        assert [name for name, _ in collector.events] == [
            "post_upsert",
            "post_cancel",
            "post_expire",
            "post_delete",
        ]
        assert collector.events[0][1]["provider"] == "APPLE"
        assert collector.events[0][1]["status"] == "ACTIVE"
        assert collector.events[2][1]["expired_at"] == NOW.isoformat()

    def test_rejected_operation_fires_nothing(
        self, wired_service: SubscriptionService, collector: _Collector
    ) -> None:
        wired_service.upsert(make_request(name=""))
        wired_service.cancel(999)
        assert collector.events == []

    def test_delete_of_missing_fires_nothing(
        self, wired_service: SubscriptionService, collector: _Collector
    ) -> None:
        wired_service.delete(999)
        assert collector.events == []

    def test_plugin_failure_becomes_warning(
        self, wired_service: SubscriptionService, plugin_manager: PluginManager
    ) -> None:
        plugin_manager.register_plugin(_Broken())
        sub_id = wired_service.upsert(make_request()).data["subscription"]["id"]

        result = wired_service.cancel(sub_id)

        assert result.ok
        assert result.warnings == ["Event dispatch failed for post_cancel"]
