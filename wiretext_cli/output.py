"""Output formatting for CLI."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wiretext.quote import quote_bytes
from wiretext.url import UrlParts

console = Console()
error_console = Console(stderr=True)

ABSENT = "(none)"


def print_error(message: str) -> None:
    """Print an error message."""
    error_console.print(f"[red]Error:[/red] {escape(message)}")


def print_json(data: Any) -> None:
    """Print data as JSON."""
    print(json.dumps(data, indent=2, default=str))


def _display(value: str | None) -> str:
    # Decoded credentials may hold control bytes; never echo them raw
    if value is None:
        return f"[dim]{ABSENT}[/dim]"
    return escape(quote_bytes(value.encode("utf-8", "surrogateescape")))


def print_url_parts(url: str, parts: UrlParts, as_json: bool = False) -> None:
    """Print the components of a split URL."""
    if as_json:
        data = {"url": url}
        data.update(parts.to_dict())
        print_json(data)
        return

    table = Table(title=escape(url), show_header=True, header_style="bold")
    table.add_column("Component")
    table.add_column("Value")
    table.add_row("scheme", _display(parts.scheme))
    table.add_row("user", _display(parts.user))
    table.add_row("password", _display(parts.password))
    table.add_row("host", _display(parts.host))
    table.add_row("port", _display(parts.port))
    table.add_row("path", _display(parts.path))
    console.print(table)


def print_decoded(value: str, decoded: str, as_json: bool = False) -> None:
    """Print a percent-decoded value."""
    if as_json:
        print_json({"value": value, "decoded": decoded})
        return

    console.print(_display(decoded))
