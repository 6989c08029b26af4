"""Shared fixtures: an in-memory stand-in for a websockets connection."""

from __future__ import annotations

import asyncio
from typing import Callable
from unittest.mock import AsyncMock, patch

import pytest

_END = object()


class FakeSocket:
    """Mimics the parts of a websockets client connection the code uses.

    ``responder`` maps each sent frame to a list of inbound items; an item
    that is an exception is raised from the iterator instead of yielded.
    """

    def __init__(self) -> None:
        self.sent: list[str] = []
        self.closed = False
        self.responder: Callable[[str], list] | None = None
        self._inbox: asyncio.Queue = asyncio.Queue()

    async def send(self, message: str) -> None:
        self.sent.append(message)
        if self.responder is not None:
            for item in self.responder(message):
                self._inbox.put_nowait(item)

    def push(self, item) -> None:
        self._inbox.put_nowait(item)

    def finish(self) -> None:
        self._inbox.put_nowait(_END)

    async def close(self) -> None:
        self.closed = True
        self._inbox.put_nowait(_END)

    def __aiter__(self) -> "FakeSocket":
        return self

    async def __anext__(self):
        item = await self._inbox.get()
        if item is _END:
            raise StopAsyncIteration
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.fixture
def fake_socket() -> FakeSocket:
    return FakeSocket()


@pytest.fixture
def ws_connect(fake_socket):
    """Patch websockets.connect to hand out *fake_socket*."""
    with patch("websockets.connect", new=AsyncMock(return_value=fake_socket)) as mock:
        yield mock
