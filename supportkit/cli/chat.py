"""
supportkit CLI - Chat Commands

Commands:
    send - Send a single message and print the reply
    chat - Interactive conversation with the bot
"""

from __future__ import annotations

import asyncio
from typing import Optional

import click
import typer

from supportkit.chat.message import ChatMessage
from supportkit.chat.service import ChatService
from supportkit.cli import app
from supportkit.config.chat_config import ChatConfig

_EXIT_WORDS = frozenset({"exit", "quit", ":q"})


def _build_config(endpoint: Optional[str], api_key: Optional[str]) -> ChatConfig:
    from supportkit.cli.output import print_error

    try:
        return ChatConfig.from_settings(api_endpoint=endpoint, api_key=api_key)
    except ValueError as exc:
        print_error("Invalid configuration", details=str(exc))
        raise typer.Exit(2)


@app.command()
def send(
    message: str = typer.Argument(..., help="Message text to send."),
    endpoint: Optional[str] = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="Chat endpoint URL (http(s):// or ws(s)://).",
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        "-k",
        help="Bearer credential for the endpoint.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the reply and its status as JSON.",
    ),
) -> None:
    """
    Send one message and print the bot's reply.

    Exits with status 1 when the reply is a fallback (missing key,
    HTTP error, transport failure or timeout).
    """
    from supportkit.cli.output import console, print_json

    config = _build_config(endpoint, api_key)

    async def _run():
        async with ChatService(config) as service:
            return await service.exchange(message)

    reply = asyncio.run(_run())

    if as_json:
        print_json({
            "reply": reply.text,
            "status": reply.status.value,
            "status_code": reply.status_code,
        })
    else:
        console.print(reply.text, markup=False, highlight=False)

    if not reply.ok:
        raise typer.Exit(1)


@app.command()
def chat(
    endpoint: Optional[str] = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="Chat endpoint URL (http(s):// or ws(s)://).",
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        "-k",
        help="Bearer credential for the endpoint.",
    ),
    title: Optional[str] = typer.Option(
        None,
        "--title",
        help="Title shown above the conversation.",
    ),
) -> None:
    """
    Start an interactive conversation.

    Type a message and press Enter; the bot's reply is printed below it.
    Type [cyan]exit[/cyan] or press Ctrl+D to quit.
    """
    from supportkit.cli.output import print_message, print_panel

    config = _build_config(endpoint, api_key)
    if title:
        config = config.with_changes(title=title)

    print_panel(
        f"Connected to {config.api_endpoint}",
        title=config.title,
        subtitle=f"transport: {config.transport.value}",
    )

    async def _loop() -> list[ChatMessage]:
        transcript: list[ChatMessage] = [ChatMessage.bot(config.initial_message)]
        print_message(transcript[0], bot_name=config.title)

        async with ChatService(config) as service:
            while True:
                try:
                    text = await asyncio.to_thread(
                        typer.prompt,
                        config.input_placeholder,
                        default="",
                        show_default=False,
                    )
                except click.exceptions.Abort:
                    break

                text = text.strip()
                if not text:
                    continue
                if text.lower() in _EXIT_WORDS:
                    break

                transcript.append(ChatMessage.user(text))
                reply = ChatMessage.bot(await service.send_message(text))
                transcript.append(reply)
                print_message(reply, bot_name=config.title)

        return transcript

    transcript = asyncio.run(_loop())
    sent = sum(1 for m in transcript if m.is_user)
    typer.echo(f"Goodbye! ({sent} message{'s' if sent != 1 else ''} sent)")
