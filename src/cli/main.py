"""CLI de netrequest (Typer + Rich).

Consumidor del Core: la CLI elige endpoint y parámetros, delega todo el
pipeline en `NetworkManager` y solo se ocupa de presentar resultados/errores.
"""

from __future__ import annotations

import asyncio
import logging
import re
from pathlib import Path
from typing import Any, List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.http_client import HttpxTransport
from adapters.json_exporter import export_json, to_jsonable
from cli import doctor
from cli.ui_components import build_error_panel, build_posts_table, build_users_table, print_banner
from core.config import AppSettings
from core.domain.endpoints import BASE_URL, Endpoint
from core.domain.models import ParamValue, Post, User
from core.errors import NetworkRequestError
from core.services.network_manager import NetworkManager

app = typer.Typer(no_args_is_help=True, help="Typed JSON requests against the registered endpoints.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


_INT_LITERAL = re.compile(r"-?[0-9]+")
_FLOAT_LITERAL = re.compile(r"-?[0-9]+\.[0-9]+")


def parse_value(raw: str) -> ParamValue:
    """Interpreta el texto de la CLI como bool, int, float o str (en ese orden).

    Solo literales decimales simples pasan a número: `nan`, `inf` o `1_000`
    se envían tal cual se escribieron.
    """

    lowered = raw.strip().lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if _INT_LITERAL.fullmatch(raw):
        return int(raw)
    if _FLOAT_LITERAL.fullmatch(raw):
        return float(raw)
    return raw


def parse_params(items: Optional[List[str]]) -> dict[str, ParamValue] | None:
    if not items:
        return None
    params: dict[str, ParamValue] = {}
    for item in items:
        if "=" not in item:
            raise typer.BadParameter(f"expected key=value, got {item!r}", param_hint="--param")
        key, value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter(f"empty key in {item!r}", param_hint="--param")
        params[key] = parse_value(value)
    return params


async def _execute(endpoint: Endpoint, params: dict[str, ParamValue] | None, response_type: Any) -> Any:
    settings = AppSettings()
    async with HttpxTransport(settings=settings) as transport:
        manager = NetworkManager(transport)
        return await manager.request(endpoint, params, response_type=response_type)


def _call(endpoint: Endpoint, params: dict[str, ParamValue] | None, response_type: Any) -> Any:
    try:
        return asyncio.run(_execute(endpoint, params, response_type))
    except NetworkRequestError as exc:
        _console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log request/response diagnostics."),
    banner: bool = typer.Option(False, "--banner", help="Print the banner before running."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid NETREQUEST_* configuration:[/red]\n{escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    logging.basicConfig(
        level="DEBUG" if verbose else settings.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    if banner:
        print_banner(_console, BASE_URL)


@app.command()
def users(
    param: Optional[List[str]] = typer.Option(None, "--param", "-p", help="Query parameter key=value."),
) -> None:
    """List users."""

    result = _call(Endpoint.USERS, parse_params(param), list[User])
    _console.print(build_users_table(result))


@app.command()
def posts(
    user_id: Optional[int] = typer.Option(None, "--user-id", help="Only posts by this user."),
) -> None:
    """List posts."""

    params = {"userId": user_id} if user_id is not None else None
    result = _call(Endpoint.POSTS, params, list[Post])
    _console.print(build_posts_table(result))


@app.command()
def create(
    title: str = typer.Option(..., "--title"),
    body: str = typer.Option(..., "--body"),
    user_id: int = typer.Option(..., "--user-id"),
) -> None:
    """Create a post (JSON body)."""

    result = _call(Endpoint.CREATE, {"title": title, "body": body, "userId": user_id}, Post)
    _console.print(build_posts_table([result]))


@app.command()
def call(
    endpoint: Endpoint = typer.Argument(..., help="Registered endpoint."),
    param: Optional[List[str]] = typer.Option(None, "--param", "-p", help="Parameter key=value."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the JSON result here."),
) -> None:
    """Call any endpoint and print the raw JSON result."""

    result = _call(endpoint, parse_params(param), Any)
    if output is not None:
        path = export_json(payload=result, output_path=output)
        _console.print(f"[green]Saved:[/green] {path}")
        return
    _console.print_json(data=to_jsonable(result))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
