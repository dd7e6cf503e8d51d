"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import ApiClient, check_health
from core.config import ClientSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: ClientSettings) -> tuple[bool, str]:
    try:
        async with ApiClient(settings) as client:
            health = await check_health(client)
    except (httpx.HTTPError, ValueError) as exc:
        return False, str(exc) or exc.__class__.__name__
    details = f"{health.get('service', '?')} {health.get('version', '')}".strip()
    if health.get("database") not in (None, "ok"):
        return False, f"{details} (database: {health.get('database')})"
    return health.get("status") == "ok", details


@app.command()
def run() -> None:
    """Show the effective configuration and check backend connectivity."""

    settings = ClientSettings()

    table = Table(title="Coordinador Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("API health", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print(
            "\n[yellow]Note:[/yellow] Run `coordinador doctor setup` to point the client at another backend."
        )
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = ClientSettings()
    base_url = typer.prompt("API base URL", default=settings.base_url, show_default=True).strip()
    timeout = typer.prompt("HTTP timeout (seconds)", default=settings.http_timeout_seconds, type=float)

    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("base URL must start with http:// or https://")
    if timeout <= 0:
        raise typer.BadParameter("timeout must be positive")

    env_path = write_user_env_vars(
        {
            "COORDINADOR_BASE_URL": base_url.rstrip("/"),
            "COORDINADOR_HTTP_TIMEOUT_SECONDS": f"{timeout:g}",
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
