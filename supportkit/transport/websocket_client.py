"""WebSocket client for real-time chat replies.

Owns a single persistent connection to a chat server, decodes inbound
``{"response": ...}`` envelopes and hands the reply text to callback slots.

Example::

    client = ChatWebSocketClient("wss://example.com/chat/KEY/1234/")
    client.on_message = lambda text: print("Received:", text)
    await client.connect()
    await client.send("Hello!")
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Any, Callable

import websockets

from supportkit.transport.envelopes import parse_inbound_frame

logger = logging.getLogger(__name__)


class ChatWebSocketClient:
    """Single-connection WebSocket client with callback-style delivery.

    Parameters
    ----------
    url:
        Fully derived WebSocket URL to connect to.
    chat_id:
        Correlation identifier embedded in *url*; kept for diagnostics.
    open_timeout:
        Seconds allowed for the opening handshake.
    display_url:
        Form of *url* to use in log lines, typically with the credential
        segment masked. Defaults to *url*.
    """

    def __init__(
        self,
        url: str,
        chat_id: str | None = None,
        *,
        open_timeout: float | None = 10.0,
        display_url: str | None = None,
    ) -> None:
        self.url = url
        self.chat_id = chat_id
        self.on_message: Callable[[str], None] | None = None
        self.on_done: Callable[[], None] | None = None
        self.on_error: Callable[[BaseException], None] | None = None

        self._open_timeout = open_timeout
        self._display_url = display_url
        self._ws: Any = None
        self._reader_task: asyncio.Task[None] | None = None
        self._lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._ws is not None

    @property
    def display_url(self) -> str:
        """The connection URL as it appears in logs."""
        return self._display_url or self.url

    async def connect(self) -> None:
        """Open the connection if it is not already open.

        Raises whatever :func:`websockets.connect` raises on failure
        (``OSError``, ``websockets.exceptions.WebSocketException``,
        ``TimeoutError``).
        """
        async with self._lock:
            if self._ws is not None:
                return

            logger.info("Opening WebSocket connection to %s", self.display_url)
            self._ws = await websockets.connect(self.url, open_timeout=self._open_timeout)
            self._reader_task = asyncio.create_task(self._read_loop(self._ws))

    async def send(self, message: str) -> None:
        """Send *message* as a raw text frame."""
        if self._ws is None:
            raise ConnectionError("WebSocket not connected")
        await self._ws.send(message)

    async def disconnect(self) -> None:
        """Stop the reader and close the connection. Safe to call repeatedly."""
        async with self._lock:
            ws, self._ws = self._ws, None
            task, self._reader_task = self._reader_task, None

            if task is not None and not task.done():
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task
            if ws is not None:
                await ws.close()
                logger.info("Closed WebSocket connection to %s", self.display_url)

    async def _read_loop(self, ws: Any) -> None:
        try:
            async for frame in ws:
                reply = parse_inbound_frame(frame)
                if reply is None:
                    continue
                if self.on_message is not None:
                    self.on_message(reply)
                else:
                    logger.debug("Reply arrived with no listener attached; dropped")
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            logger.warning("WebSocket read failed on %s: %s", self.display_url, exc)
            if self.on_error is not None:
                self.on_error(exc)
            if self._ws is ws:
                self._ws = None
                self._reader_task = None
            # unusable after a read failure
            with contextlib.suppress(Exception):
                await ws.close()
        finally:
            if self._ws is ws:
                self._ws = None
                self._reader_task = None

        logger.info("WebSocket connection to %s closed by peer", self.display_url)
        if self.on_done is not None:
            self.on_done()
