"""Cine-List command line.

Each command runs exactly one backend operation and prints the decoded
response. `OperationFailed` is caught here, at the command boundary, and
turned into exit code 1.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, List, Optional

import typer
from rich.console import Console

from adapters.cine_list_api import CineListClient
from cli import doctor
from cli.ui_components import build_movies_table, print_banner, print_failure, print_result
from core.config import AppSettings
from core.domain.errors import OperationFailed
from core.domain.models import Movie, parse_movies
from core.logging_config import setup_logging

app = typer.Typer(no_args_is_help=True, help="Client for the Cine-List movie backend.")
movies_app = typer.Typer(no_args_is_help=True, help="Create, read, update and delete movies.")
app.add_typer(movies_app, name="movies")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _parse_cookies(values: List[str]) -> dict[str, str]:
    cookies: dict[str, str] = {}
    for raw in values:
        name, sep, value = raw.partition("=")
        if not sep or not name.strip():
            raise typer.BadParameter(f"expected NAME=VALUE, got {raw!r}", param_hint="--cookie")
        cookies[name.strip()] = value.strip()
    return cookies


def _movie_body(data: Optional[str], title: Optional[str], rating: Optional[float]) -> Any:
    if data is not None:
        try:
            body = json.loads(data)
        except ValueError as exc:
            raise typer.BadParameter(f"invalid JSON: {exc}", param_hint="--data") from exc
        if not isinstance(body, dict):
            raise typer.BadParameter("expected a JSON object", param_hint="--data")
        return body
    if title is None and rating is None:
        raise typer.BadParameter("provide --data or at least one of --title/--rating")
    return Movie(titulo=title, nota=rating).to_payload()


def _execute(operation: Awaitable[Any]) -> Any:
    try:
        return asyncio.run(operation)
    except OperationFailed as exc:
        print_failure(_err_console, exc)
        raise typer.Exit(code=1) from exc


def _client(ctx: typer.Context | None = None) -> CineListClient:
    cookies = (ctx.obj or {}) if ctx is not None else {}
    return CineListClient(AppSettings(), session_cookies=cookies)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override CINE_LIST_LOG_LEVEL."),
    banner: bool = typer.Option(False, "--banner", help="Show the banner before running."),
) -> None:
    setup_logging(log_level or AppSettings().log_level)
    if banner:
        print_banner(_err_console)


@app.command()
def login(
    email: str = typer.Argument(..., help="Account e-mail."),
    password: str = typer.Option(..., prompt=True, hide_input=True),
) -> None:
    """Authenticate against the backend."""

    print_result(_console, _execute(_client().login(email, password)))


@app.command()
def register(
    name: str = typer.Argument(...),
    email: str = typer.Argument(...),
    cpf: str = typer.Argument(..., help="Brazilian tax id."),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True),
) -> None:
    """Create a new account."""

    print_result(_console, _execute(_client().register(name, email, cpf, password)))


@app.command(name="reset-password")
def reset_password(
    token: str = typer.Argument(..., help="Token from the reset e-mail."),
    new_password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True),
) -> None:
    """Set a new password with a reset token."""

    print_result(_console, _execute(_client().reset_password(token, new_password)))


@movies_app.callback()
def movies(
    ctx: typer.Context,
    cookie: List[str] = typer.Option(
        [],
        "--cookie",
        "-c",
        help="Session cookie as NAME=VALUE (repeatable).",
    ),
) -> None:
    ctx.obj = _parse_cookies(cookie)


@movies_app.command("list")
def list_movies(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table."),
) -> None:
    """List every movie."""

    data = _execute(_client(ctx).list_movies())
    if as_json or not isinstance(data, list):
        print_result(_console, data)
        return
    movies = parse_movies(data)
    if len(movies) != len(data):
        # Items the table cannot show: print the raw response instead.
        print_result(_console, data)
        return
    _console.print(build_movies_table(movies))


@movies_app.command("get")
def get_movie(ctx: typer.Context, movie_id: str = typer.Argument(...)) -> None:
    """Show one movie."""

    print_result(_console, _execute(_client(ctx).get_movie(movie_id)))


@movies_app.command("create")
def create_movie(
    ctx: typer.Context,
    data: Optional[str] = typer.Option(None, "--data", help="Movie attributes as a JSON object."),
    title: Optional[str] = typer.Option(None, "--title"),
    rating: Optional[float] = typer.Option(None, "--rating"),
) -> None:
    """Create a movie."""

    body = _movie_body(data, title, rating)
    print_result(_console, _execute(_client(ctx).create_movie(body)))


@movies_app.command("update")
def update_movie(
    ctx: typer.Context,
    movie_id: str = typer.Argument(...),
    data: Optional[str] = typer.Option(None, "--data", help="Movie attributes as a JSON object."),
    title: Optional[str] = typer.Option(None, "--title"),
    rating: Optional[float] = typer.Option(None, "--rating"),
) -> None:
    """Replace a movie's attributes."""

    body = _movie_body(data, title, rating)
    print_result(_console, _execute(_client(ctx).update_movie(movie_id, body)))


@movies_app.command("delete")
def delete_movie(ctx: typer.Context, movie_id: str = typer.Argument(...)) -> None:
    """Delete a movie."""

    print_result(_console, _execute(_client(ctx).delete_movie(movie_id)))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
