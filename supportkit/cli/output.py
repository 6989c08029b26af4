"""
supportkit CLI - Rich Output Helpers

Utility functions for consistent command-line output using Rich.

Functions:
    print_json     - Print formatted JSON
    print_table    - Print a formatted table
    print_error    - Print error message
    print_panel    - Print a bordered panel
    print_message  - Print one chat transcript line
"""

from __future__ import annotations

import json
from typing import Optional

from rich.console import Console
from rich.json import JSON
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from supportkit.chat.message import ChatMessage

# Create console instances
console = Console()
err_console = Console(stderr=True)


def print_json(
    data: dict | list,
    indent: int = 2,
    highlight: bool = True,
) -> None:
    """
    Print formatted JSON.

    Args:
        data: Data to print as JSON
        indent: Indentation level
        highlight: Whether to syntax highlight
    """
    json_str = json.dumps(data, indent=indent, default=str)
    if highlight:
        console.print(JSON(json_str))
    else:
        console.print(json_str, markup=False, highlight=False)


def print_table(
    title: str,
    columns: list[str],
    rows: list[list[str]],
    styles: Optional[list[str]] = None,
) -> None:
    """
    Print a rich table.

    Args:
        title: Table title
        columns: Column headers
        rows: Table rows (list of lists)
        styles: Optional column styles
    """
    table = Table(title=title)

    for i, col in enumerate(columns):
        style = styles[i] if styles and i < len(styles) else None
        table.add_column(col, style=style)

    for row in rows:
        padded_row = list(row) + [""] * (len(columns) - len(row))
        table.add_row(*padded_row[:len(columns)])

    console.print(table)


def print_error(
    message: str,
    details: Optional[str] = None,
    hint: Optional[str] = None,
) -> None:
    """
    Print error message.

    Args:
        message: Error message
        details: Optional detailed error information
        hint: Optional hint for resolving the error
    """
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    if details:
        err_console.print(f"[dim]{escape(details)}[/dim]")

    if hint:
        err_console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


def print_panel(
    content: str,
    title: Optional[str] = None,
    subtitle: Optional[str] = None,
    style: str = "default",
) -> None:
    """
    Print a bordered panel.

    Args:
        content: Panel content
        title: Optional panel title
        subtitle: Optional panel subtitle
        style: Panel style (default, success, error, warning, info)
    """
    border_style = {
        "default": "blue",
        "success": "green",
        "error": "red",
        "warning": "yellow",
        "info": "cyan",
    }.get(style, "blue")

    console.print(Panel.fit(
        escape(content),
        title=title,
        subtitle=subtitle,
        border_style=border_style,
    ))


def print_message(message: ChatMessage, bot_name: str = "bot") -> None:
    """Print a chat message with a sender label."""
    if message.is_user:
        label = "[bold cyan]you[/bold cyan]"
    else:
        label = f"[bold green]{escape(bot_name)}[/bold green]"
    stamp = message.timestamp.strftime("%H:%M")
    console.print(f"[dim]{stamp}[/dim] {label}: {escape(message.text)}")
