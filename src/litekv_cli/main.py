"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from litekv_client.observability import (
    bind_store_context,
    clear_store_context,
    configure_logging,
)
from litekv_client.store import KVStore
from litekv_core.config.settings import Settings
from litekv_core.exceptions import LiteKVError

T = TypeVar("T")

app = typer.Typer(
    name="litekv",
    help="Command-line client for the LiteKV key-value service",
)
console = Console()
logger = structlog.get_logger()


@app.callback()
def main(
    ctx: typer.Context,
    app_id: str | None = typer.Option(
        None, "--app-id", help="Application id (defaults to LITEKV_APP_ID)"
    ),
    api_url: str | None = typer.Option(None, "--api-url", help="Override the API base URL"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Resolve settings shared by every command."""
    settings = Settings()
    if app_id:
        settings.app_id = app_id
    if api_url:
        settings.api_url = api_url.rstrip("/")
    if verbose:
        settings.log_level = "DEBUG"

    configure_logging(settings)
    ctx.obj = settings


@app.command()
def exists(ctx: typer.Context) -> None:
    """Check that the application id is known to the service."""
    _run(ctx.obj, lambda store: store.check_app_exists())
    console.print(f"[green]App '{escape(ctx.obj.app_id)}' exists[/green]")


@app.command("set")
def set_value(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Key to write"),
    value: str = typer.Argument(..., help="Value to store"),
) -> None:
    """Store VALUE under KEY."""
    _report(_run(ctx.obj, lambda store: store.set(key, value)))


@app.command()
def get(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Key to read"),
) -> None:
    """Print the value stored under KEY."""
    value = _run(ctx.obj, lambda store: store.get(key))
    if value is None:
        console.print(f"[yellow]Key '{escape(key)}' not found[/yellow]")
        raise typer.Exit(code=1)
    console.print(value, markup=False, highlight=False, soft_wrap=True)


@app.command()
def delete(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Key to delete"),
) -> None:
    """Delete KEY."""
    _report(_run(ctx.obj, lambda store: store.delete(key)))


@app.command()
def inc(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Counter key"),
    by: int = typer.Option(1, "--by", help="Amount to add"),
) -> None:
    """Increment the counter stored under KEY."""
    _report(_run(ctx.obj, lambda store: store.inc(key, by)))


@app.command()
def dec(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Counter key"),
    by: int = typer.Option(1, "--by", help="Amount to subtract"),
) -> None:
    """Decrement the counter stored under KEY."""
    _report(_run(ctx.obj, lambda store: store.dec(key, by)))


@app.command()
def version() -> None:
    """Show version."""
    console.print("litekv v0.1.0")


def _run(settings: Settings, operation: Callable[[KVStore], Awaitable[T]]) -> T:
    """Run one store operation to completion, mapping client errors to exit codes."""
    if not settings.app_id:
        console.print("[red]Error:[/red] Provide --app-id or set LITEKV_APP_ID")
        raise typer.Exit(code=1)

    bind_store_context(settings.app_id, settings.api_url)
    try:
        return asyncio.run(_call(settings, operation))
    except LiteKVError as exc:
        logger.error("litekv_cli_failed", error=str(exc))
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    finally:
        clear_store_context()


async def _call(settings: Settings, operation: Callable[[KVStore], Awaitable[T]]) -> T:
    async with KVStore.from_settings(settings) as store:
        return await operation(store)


def _report(succeeded: bool) -> None:
    if succeeded:
        console.print("[green]ok[/green]")
        return
    console.print("[red]failed[/red]")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
