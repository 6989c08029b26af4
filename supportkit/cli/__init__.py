"""
supportkit - Command Line Interface

Talk to a configured chat backend from the terminal. Built with Typer for
argument parsing and Rich for output.

Usage:
    $ supportkit --help
    $ supportkit send "Where is my order?"
    $ supportkit chat --endpoint wss://bot.example.com/chat --api-key KEY
    $ supportkit config show

Sub-command Groups:
    config - Configuration inspection

For detailed help on any command:
    $ supportkit <command> --help
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from supportkit import __version__

# Create main console for output
console = Console()

# Create main application
app = typer.Typer(
    name="supportkit",
    help="supportkit - chat with a support bot over HTTP or WebSocket",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)

config_app = typer.Typer(
    name="config",
    help="Configuration commands",
    no_args_is_help=True,
)

app.add_typer(config_app, name="config")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"supportkit version {__version__}")
        raise typer.Exit()


def verbose_callback(value: bool) -> None:
    """Set verbose mode."""
    if value:
        logging.basicConfig(level=logging.DEBUG)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        callback=verbose_callback,
        help="Enable debug logging.",
    ),
) -> None:
    """
    supportkit - chat with a support bot over HTTP or WebSocket.

    The endpoint and API key come from SUPPORTKIT_API_ENDPOINT and
    SUPPORTKIT_API_KEY (or a .env file) unless given on the command line.
    """
    if not verbose:
        from supportkit.config.settings import settings

        logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.WARNING))


# Command modules register themselves on import
from supportkit.cli import chat as _chat  # noqa: E402,F401
from supportkit.cli import config as _config  # noqa: E402,F401

__all__ = [
    "app",
    "config_app",
    "console",
    "__version__",
]


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
