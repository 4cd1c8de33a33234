"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.endpoints import BASE_URL, Endpoint

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and endpoint registry checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="netrequest doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Registry", "OK", f"{len(Endpoint)} endpoints")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(BASE_URL, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            f"\n[yellow]Note:[/yellow] {BASE_URL} is unreachable; every endpoint call will fail with a TransportError."
        )
        raise typer.Exit(code=1)


@app.command()
def endpoints() -> None:
    """Print the endpoint registry."""

    table = Table(title="Endpoints")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Method", style="white", no_wrap=True)
    table.add_column("Encoding", style="white")
    table.add_column("URL", style="magenta")
    table.add_column("Headers", style="dim")
    for endpoint in Endpoint:
        headers = ", ".join(f"{k}: {v}" for k, v in endpoint.headers.items())
        table.add_row(
            endpoint.value,
            endpoint.http_method.value,
            "json" if endpoint.is_json_encoded else "query",
            endpoint.url,
            headers,
        )
    _console.print(table)
