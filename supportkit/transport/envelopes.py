"""Wire models for the chat transports.

Outbound HTTP bodies follow the chat-completions shape::

    {"messages": [{"role": "user", "content": "<text>"}]}

and replies are read from ``choices[0].message.content``.  Inbound WebSocket
frames are JSON envelopes carrying a single ``response`` string; anything
else on the socket is ignored.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# HTTP request body
# ---------------------------------------------------------------------------

class ChatTurn(BaseModel):
    """One message in a chat-completions request."""

    role: Literal["user", "assistant", "system"] = "user"
    content: str


class ChatCompletionRequest(BaseModel):
    """Body of a chat-completions POST."""

    messages: list[ChatTurn] = Field(..., min_length=1)

    @classmethod
    def for_user_text(cls, text: str) -> ChatCompletionRequest:
        return cls(messages=[ChatTurn(role="user", content=text)])


def extract_completion_text(data: Any) -> str | None:
    """Return ``choices[0].message.content`` from a decoded response body.

    Any missing level, wrong container type, empty ``choices`` list or
    non-string content yields ``None``.
    """
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None


# ---------------------------------------------------------------------------
# WebSocket inbound envelope
# ---------------------------------------------------------------------------

class InboundEnvelope(BaseModel):
    """Reply envelope pushed by a WebSocket chat server."""

    response: str = Field(..., strict=True)


def parse_inbound_frame(frame: str | bytes) -> str | None:
    """Decode a WebSocket frame and return its ``response`` text.

    Returns ``None`` for frames that are not UTF-8, not JSON (including
    JSON nested too deeply to decode), not a JSON object, or lack a string
    ``response`` field.
    """
    if isinstance(frame, (bytes, bytearray)):
        try:
            frame = bytes(frame).decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Dropping undecodable binary frame (%d bytes)", len(frame))
            return None

    try:
        data = json.loads(frame)
    except (ValueError, RecursionError):
        logger.debug("Dropping non-JSON frame: %.80r", frame)
        return None

    if not isinstance(data, dict):
        logger.debug("Dropping non-object frame: %.80r", frame)
        return None

    try:
        return InboundEnvelope.model_validate(data).response
    except ValidationError:
        logger.debug("Dropping frame without a response field: %.80r", frame)
        return None
