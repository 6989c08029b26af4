"""
supportkit CLI - Configuration Commands

Commands:
    show - Display the effective chat configuration
"""

from __future__ import annotations

from typing import Any

import typer

from supportkit.cli import config_app
from supportkit.config.chat_config import ChatConfig


def mask_secret(value: str | None, visible: int = 4) -> str:
    """Mask all but the last *visible* characters of a secret."""
    if not value:
        return "(not set)"
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]


def describe_config(config: ChatConfig, show_secrets: bool = False) -> dict[str, Any]:
    """Flatten a ChatConfig into displayable key/value pairs."""
    return {
        "api_endpoint": config.api_endpoint,
        "transport": config.transport.value,
        "api_key": config.api_key if show_secrets else mask_secret(config.api_key),
        "title": config.title,
        "initial_message": config.initial_message,
        "input_placeholder": config.input_placeholder,
        "response_timeout": config.response_timeout,
        "http_timeout": config.http_timeout,
    }


@config_app.command("show")
def show_config(
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print configuration as JSON.",
    ),
    secrets: bool = typer.Option(
        False,
        "--secrets",
        help="Show secret values (use with caution).",
    ),
) -> None:
    """
    Display the effective chat configuration.

    Values come from SUPPORTKIT_* environment variables and the .env
    file, falling back to built-in defaults.
    """
    from supportkit.cli.output import print_error, print_json, print_table

    try:
        config = ChatConfig.from_settings()
    except ValueError as exc:
        print_error("Invalid configuration", details=str(exc))
        raise typer.Exit(2)

    data = describe_config(config, show_secrets=secrets)
    if as_json:
        print_json(data)
        return

    print_table(
        "Chat Configuration",
        ["Setting", "Value"],
        [[key, str(value)] for key, value in data.items()],
        styles=["cyan", None],
    )
