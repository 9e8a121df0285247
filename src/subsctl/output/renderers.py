"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from subsctl.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from subsctl.services.result import ServiceResult

_SUBSCRIPTION_KEYS = ("id", "user_id", "name", "provider", "status", "expiration_date")


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text when Rich detects no terminal, which is the case
    inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: ids only for lists, otherwise a one-line status."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items:
        return "\n".join(str(item["id"]) for item in items)

    subscription = result.data.get("subscription")
    if subscription:
        return str(subscription["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="subs.ok"), Text(f"  {result.op}", style="subs.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="subs.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="subs.id")
    elif key == "status":
        v = Text(str(value), style=style_for_status(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="subs.warning"), warning, sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="subs.error"),
        Text(f"  {result.op}", style="subs.op"),
        Text(" — "),
        msg,
        sep="",
    )
    if err is None:
        return

    # Validation failures always list every failed check.
    for field_error in err.detail.get("errors", []):
        console.print(f"  [{field_error['code']}] {field_error['message']}")

    if verbose:
        for k, v in err.detail.items():
            if k != "errors":
                console.print(f"    {k}: {v}")


# ── Success renderers ─────────────────────────────────────────────────


def _render_subscription(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render upsert/cancel/expire/get results."""
    _status_line(console, result)
    subscription = result.data.get("subscription", {})
    for key in _SUBSCRIPTION_KEYS:
        if key in subscription:
            _field(console, key, subscription[key])
    _render_warnings(console, result)


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="subs.id", no_wrap=True, justify="right")
    table.add_column("User", justify="right")
    table.add_column("Name")
    table.add_column("Provider")
    table.add_column("Status")
    table.add_column("Expires", style="dim")

    for item in items:
        status = str(item.get("status", ""))
        table.add_row(
            str(item.get("id", "")),
            str(item.get("user_id", "")),
            str(item.get("name", "")),
            str(item.get("provider", "")),
            Text(status, style=style_for_status(status)),
            str(item.get("expiration_date", "")),
        )

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} subscriptions")


def _render_delete(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "id", result.data.get("id"))
    _field(console, "deleted", result.data.get("deleted"))
    _render_warnings(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "upsert": _render_subscription,
    "cancel": _render_subscription,
    "expire": _render_subscription,
    "get": _render_subscription,
    "list": _render_list,
    "delete": _render_delete,
}
