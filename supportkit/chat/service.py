"""Chat service that routes user messages to the configured backend.

The endpoint URL scheme in :class:`~supportkit.config.ChatConfig` picks the
transport on every call:

- ``ws://`` / ``wss://`` endpoints use a persistent WebSocket connection
- ``http://`` / ``https://`` endpoints use a chat-completions HTTP POST

Every failure path resolves to displayable text instead of raising, since
callers only ever render the reply.  :meth:`ChatService.exchange` adds a
:class:`ReplyStatus` for callers that need to tell replies and fallbacks
apart.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
from websockets.exceptions import WebSocketException

from supportkit.config.chat_config import ChatConfig, Transport
from supportkit.transport.envelopes import ChatCompletionRequest, extract_completion_text
from supportkit.transport.websocket_client import ChatWebSocketClient

logger = logging.getLogger(__name__)

NO_API_KEY_MESSAGE = "Please configure an API key to enable AI responses."
NO_RESPONSE_MESSAGE = "No response received."
GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."
WEBSOCKET_TIMEOUT_MESSAGE = "WebSocket timeout."


class ReplyStatus(str, Enum):
    """How a chat exchange ended."""

    OK = "ok"
    NOT_CONFIGURED = "not_configured"
    EMPTY_RESPONSE = "empty_response"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class ChatReply:
    """Displayable reply text plus the outcome that produced it."""

    text: str
    status: ReplyStatus = ReplyStatus.OK
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.status == ReplyStatus.OK


def http_error_message(status_code: int) -> str:
    return f"Error: Failed to get response ({status_code})"


def websocket_error_message(error: object) -> str:
    return f"WebSocket error: {error}"


class ChatService:
    """Sends one user message per call and returns the bot's reply.

    A WebSocket connection, when used, is created on the first call and
    reused for the lifetime of the service together with its correlation
    identifier.  Round trips on that shared socket are serialized: the
    server protocol carries no per-message correlation, so only one call
    may wait for an envelope at a time.

    Callbacks are detached when a call resolves, so a late envelope for a
    call that already timed out is dropped if it arrives before the next
    call starts.  One that arrives after the next call has sent its message
    cannot be told apart from the real reply and resolves that call
    instead.

    Parameters
    ----------
    config:
        Endpoint, credential and timeout configuration.
    """

    def __init__(self, config: ChatConfig) -> None:
        self.config = config
        self._ws_client: ChatWebSocketClient | None = None
        self._ws_lock = asyncio.Lock()

    @property
    def chat_id(self) -> str | None:
        """Correlation identifier of the cached WebSocket connection, if any."""
        return self._ws_client.chat_id if self._ws_client is not None else None

    async def send_message(self, message: str) -> str:
        """Send *message* and return the reply text (or a fallback string)."""
        reply = await self.exchange(message)
        return reply.text

    async def exchange(self, message: str) -> ChatReply:
        """Send *message* and return the reply with its :class:`ReplyStatus`."""
        if self.config.transport is Transport.WEBSOCKET:
            return await self._send_via_websocket(message)
        return await self._send_via_http(message)

    async def close(self) -> None:
        """Disconnect the cached WebSocket connection, if one was opened."""
        if self._ws_client is not None:
            await self._ws_client.disconnect()

    async def __aenter__(self) -> ChatService:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    # -- HTTP ---------------------------------------------------------------

    def _http_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.config.referer,
            "X-Title": self.config.client_title,
        }

    async def _send_via_http(self, message: str) -> ChatReply:
        if not self.config.has_api_key:
            return ChatReply(NO_API_KEY_MESSAGE, ReplyStatus.NOT_CONFIGURED)

        body = ChatCompletionRequest.for_user_text(message).model_dump(mode="json")
        try:
            async with httpx.AsyncClient(timeout=self.config.http_timeout) as client:
                resp = await client.post(
                    self.config.api_endpoint,
                    json=body,
                    headers=self._http_headers(),
                )
                if resp.status_code != 200:
                    logger.warning(
                        "Chat endpoint returned HTTP %s", resp.status_code
                    )
                    return ChatReply(
                        http_error_message(resp.status_code),
                        ReplyStatus.HTTP_ERROR,
                        status_code=resp.status_code,
                    )
                data = resp.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            logger.warning("Chat request failed: %s", exc)
            return ChatReply(GENERIC_ERROR_MESSAGE, ReplyStatus.TRANSPORT_ERROR)

        text = extract_completion_text(data)
        if text is None:
            logger.debug("Chat response had no choices[0].message.content")
            return ChatReply(NO_RESPONSE_MESSAGE, ReplyStatus.EMPTY_RESPONSE, status_code=200)
        return ChatReply(text, status_code=200)

    # -- WebSocket ----------------------------------------------------------

    def _websocket_url(self, chat_id: str, *, masked: bool = False) -> str:
        base = self.config.api_endpoint.strip().rstrip("/")
        key = self.config.api_key or ""
        if masked and key:
            key = "***"
        return f"{base}/{key}/{chat_id}/"

    def _get_ws_client(self) -> ChatWebSocketClient:
        if self._ws_client is None:
            chat_id = str(uuid.uuid4())
            self._ws_client = ChatWebSocketClient(
                self._websocket_url(chat_id),
                chat_id,
                display_url=self._websocket_url(chat_id, masked=True),
            )
            logger.debug("Created WebSocket client for chat %s", chat_id)
        return self._ws_client

    async def _send_via_websocket(self, message: str) -> ChatReply:
        async with self._ws_lock:
            client = self._get_ws_client()
            pending: asyncio.Future[ChatReply] = asyncio.get_running_loop().create_future()

            def _on_message(text: str) -> None:
                if not pending.done():
                    pending.set_result(ChatReply(text))

            def _on_error(error: BaseException) -> None:
                if not pending.done():
                    pending.set_result(
                        ChatReply(websocket_error_message(error), ReplyStatus.TRANSPORT_ERROR)
                    )

            client.on_message = _on_message
            client.on_error = _on_error
            try:
                try:
                    await client.connect()
                    await client.send(message)
                except (OSError, WebSocketException, asyncio.TimeoutError) as exc:
                    logger.warning("WebSocket send failed: %s", exc)
                    return ChatReply(websocket_error_message(exc), ReplyStatus.TRANSPORT_ERROR)

                try:
                    return await asyncio.wait_for(pending, timeout=self.config.response_timeout)
                except asyncio.TimeoutError:
                    logger.warning(
                        "No WebSocket reply within %.1fs", self.config.response_timeout
                    )
                    return ChatReply(WEBSOCKET_TIMEOUT_MESSAGE, ReplyStatus.TIMEOUT)
            finally:
                client.on_message = None
                client.on_error = None
