"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show the active configuration."""

    settings = AppSettings()

    table = Table(title="Cine-List Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("App origin", "OK", settings.app_origin)
    if settings.reset_password_relative and settings.app_origin != settings.api_base_url:
        table.add_row(
            "Reset password",
            "WARN",
            "Addressed to app origin, not the API host (reset_password_relative=true)",
        )
    else:
        table.add_row(
            "Reset password",
            "OK",
            "app origin" if settings.reset_password_relative else "API host",
        )
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings.api_base_url, settings))
    table.add_row("Backend connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)
    _console.print(f"[dim]User config file: {get_user_env_file()}[/dim]")


@app.command()
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    defaults = AppSettings()
    api_base_url = typer.prompt("Backend base URL", default=defaults.api_base_url, show_default=True).strip()
    app_origin = typer.prompt("Web app origin", default=defaults.app_origin, show_default=True).strip()

    if not api_base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("base URL must start with http:// or https://")
    if not app_origin.startswith(("http://", "https://")):
        raise typer.BadParameter("origin must start with http:// or https://")

    env_path = write_user_env_vars(
        {
            "CINE_LIST_API_BASE_URL": api_base_url,
            "CINE_LIST_APP_ORIGIN": app_origin,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
