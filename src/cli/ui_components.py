"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Post, User
from core.errors import HTTPStatusError, NetworkRequestError


def print_banner(console: Console, base_url: str) -> None:
    title = Text("netrequest", style="bold cyan")
    subtitle = Text(base_url, style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_users_table(users: Iterable[User]) -> Table:
    table = Table(title="Users")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Username", style="green")
    table.add_column("Email", style="magenta")
    for user in users:
        table.add_row(str(user.id), user.name, user.username, user.email)
    return table


def build_posts_table(posts: Iterable[Post]) -> Table:
    table = Table(title="Posts")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("User", style="green", no_wrap=True)
    table.add_column("Title", style="white")
    for post in posts:
        table.add_row(str(post.id), str(post.user_id), post.title)
    return table


def build_error_panel(error: NetworkRequestError) -> Panel:
    """Panel para presentar un fallo del pipeline."""

    body = Text(str(error) or type(error).__name__)
    if isinstance(error, HTTPStatusError) and error.body:
        body.append("\n\n")
        body.append(error.body[:500].decode("utf-8", errors="replace"), style="dim")
    return Panel(body, title=Text(type(error).__name__, style="bold red"), border_style="red")
