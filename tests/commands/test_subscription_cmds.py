"""Tests for the subscription CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from subsctl.cli import cli


def _invoke_json(runner: CliRunner, *args: str) -> tuple[int, dict[str, Any]]:
    result = runner.invoke(cli, ["--json", *args])
    stream = result.stdout if result.exit_code == 0 else result.stderr
    return result.exit_code, json.loads(stream)


def _create(runner: CliRunner, user_id: int = 1, provider: str = "GOOGLE") -> int:
    code, payload = _invoke_json(
        runner,
        "create",
        "--user-id",
        str(user_id),
        "--name",
        "Premium",
        "--provider",
        provider,
        "--expires",
        "2030-01-01T00:00:00",
    )
    assert code == 0, payload
    return int(payload["data"]["subscription"]["id"])


@pytest.mark.usefixtures("_isolated_root")
class TestCreate:
    def test_create(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        code, payload = _invoke_json(
            cli_runner,
            "create",
            "--user-id",
            "1",
            "--name",
            "Premium",
            "--provider",
            "APPLE",
            "--expires",
            "2030-01-01T00:00:00",
        )

        assert code == 0
        sub = payload["data"]["subscription"]
        assert sub["status"] == "ACTIVE"
        assert sub["provider"] == "APPLE"
        assert (tmp_path / ".subsctl" / "subsctl.db").is_file()

    def test_missing_fields_reported_together(self, cli_runner: CliRunner) -> None:
        code, payload = _invoke_json(cli_runner, "create")

        assert code == 1
        assert payload["error"]["code"] == "VALIDATION_FAILED"
        assert [e["code"] for e in payload["error"]["detail"]["errors"]] == [100, 101, 102, 103]

    def test_unknown_provider(self, cli_runner: CliRunner) -> None:
        code, payload = _invoke_json(
            cli_runner,
            "create",
            "--user-id",
            "1",
            "--name",
            "Premium",
            "--provider",
            "google",
            "--expires",
            "2030-01-01",
        )

        assert code == 1
        assert payload["error"]["detail"]["errors"] == [
            {"code": 102, "message": "provider is invalid"}
        ]

    def test_expires_before_min_instant(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "create",
                "--user-id",
                "1",
                "--name",
                "Premium",
                "--provider",
                "GOOGLE",
                "--expires",
                "0001-01-01T00:30:00+01:00",
            ],
        )

        assert result.exit_code == 1
        assert "[103] expirationDate is invalid" in result.stderr

    def test_bad_timestamp_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["create", "--expires", "next tuesday"])
        assert result.exit_code == 2
        assert "ISO 8601" in result.stderr

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "create",
                "--user-id",
                "1",
                "--name",
                "Premium",
                "--provider",
                "GOOGLE",
                "--expires",
                "2030-01-01T00:00:00",
            ],
        )
        assert result.exit_code == 0
        assert "status: ACTIVE" in result.stdout


@pytest.mark.usefixtures("_isolated_root")
class TestLifecycle:
    def test_cancel(self, cli_runner: CliRunner) -> None:
        sub_id = _create(cli_runner)

        code, payload = _invoke_json(cli_runner, "cancel", str(sub_id))

        assert code == 0
        assert payload["data"]["subscription"]["status"] == "CANCELED"

    def test_cancel_twice(self, cli_runner: CliRunner) -> None:
        sub_id = _create(cli_runner)
        _invoke_json(cli_runner, "cancel", str(sub_id))

        code, payload = _invoke_json(cli_runner, "cancel", str(sub_id))

        assert code == 1
        assert payload["error"]["message"] == f"Only active subscription {sub_id} can be canceled"

    def test_expire_after_cancel(self, cli_runner: CliRunner) -> None:
        sub_id = _create(cli_runner)
        _invoke_json(cli_runner, "cancel", str(sub_id))

        code, payload = _invoke_json(cli_runner, "expire", str(sub_id))

        assert code == 0
        assert payload["data"]["subscription"]["status"] == "EXPIRED"

    def test_expire_twice(self, cli_runner: CliRunner) -> None:
        sub_id = _create(cli_runner)
        _invoke_json(cli_runner, "expire", str(sub_id))

        code, payload = _invoke_json(cli_runner, "expire", str(sub_id))

        assert code == 1
        assert payload["error"]["message"] == f"Subscription {sub_id} has already expired"

    def test_cancel_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["cancel", "404"])
        assert result.exit_code == 1
        assert "No subscription found with ID: 404" in result.stderr


@pytest.mark.usefixtures("_isolated_root")
class TestQueries:
    def test_show(self, cli_runner: CliRunner) -> None:
        sub_id = _create(cli_runner)
        code, payload = _invoke_json(cli_runner, "show", str(sub_id))
        assert code == 0
        assert payload["data"]["subscription"]["id"] == sub_id

    def test_list_filter(self, cli_runner: CliRunner) -> None:
        _create(cli_runner, user_id=1)
        _create(cli_runner, user_id=2)

        code, payload = _invoke_json(cli_runner, "list", "--user-id", "2")

        assert code == 0
        assert payload["data"]["count"] == 1
        assert payload["data"]["items"][0]["user_id"] == 2

    def test_list_quiet(self, cli_runner: CliRunner) -> None:
        first = _create(cli_runner)
        second = _create(cli_runner)

        result = cli_runner.invoke(cli, ["-q", "list"])

        assert result.exit_code == 0
        assert result.stdout.split() == [str(first), str(second)]


@pytest.mark.usefixtures("_isolated_root")
class TestDelete:
    def test_delete(self, cli_runner: CliRunner) -> None:
        sub_id = _create(cli_runner)

        code, payload = _invoke_json(cli_runner, "delete", str(sub_id))
        assert code == 0
        assert payload["data"] == {"id": sub_id, "deleted": True}

        code, _ = _invoke_json(cli_runner, "show", str(sub_id))
        assert code == 1

    def test_delete_missing(self, cli_runner: CliRunner) -> None:
        code, payload = _invoke_json(cli_runner, "delete", "404")
        assert code == 0
        assert payload["data"]["deleted"] is False


@pytest.mark.usefixtures("_isolated_root")
class TestConfigFile:
    def test_database_path_from_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "subsctl.toml").write_text(
            '[database]\npath = "custom/subs.db"\n', encoding="utf-8"
        )

        _create(cli_runner)

        assert (tmp_path / "custom" / "subs.db").is_file()


@pytest.mark.usefixtures("_isolated_root")
@pytest.mark.parametrize("command", ["create", "cancel", "expire", "show", "list", "delete"])
def test_examples_flag(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert f"subsctl {command}" in result.stdout
