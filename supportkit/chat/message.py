"""Chat message value types shared by front-ends."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class MessageSender(str, Enum):
    """Who sent a message in the conversation."""

    USER = "user"
    BOT = "bot"


@dataclass(frozen=True)
class ChatMessage:
    """A single message in a chat conversation.

    Attributes:
        text: The text content of the message.
        sender: Who sent this message.
        timestamp: When the message was created. Defaults to now (UTC).
    """

    text: str
    sender: MessageSender
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_user(self) -> bool:
        return self.sender == MessageSender.USER

    @property
    def is_bot(self) -> bool:
        return self.sender == MessageSender.BOT

    @classmethod
    def user(cls, text: str) -> ChatMessage:
        return cls(text=text, sender=MessageSender.USER)

    @classmethod
    def bot(cls, text: str) -> ChatMessage:
        return cls(text=text, sender=MessageSender.BOT)
