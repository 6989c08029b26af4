"""Chat service and message types.

Example usage::

    from supportkit.chat import ChatService
    from supportkit.config import ChatConfig

    async with ChatService(ChatConfig(api_endpoint="wss://bot.example/chat", api_key="K")) as chat:
        reply = await chat.send_message("hi")
"""

from supportkit.chat.message import ChatMessage, MessageSender
from supportkit.chat.service import (
    GENERIC_ERROR_MESSAGE,
    NO_API_KEY_MESSAGE,
    NO_RESPONSE_MESSAGE,
    WEBSOCKET_TIMEOUT_MESSAGE,
    ChatReply,
    ChatService,
    ReplyStatus,
)

__all__ = [
    "ChatMessage",
    "ChatReply",
    "ChatService",
    "GENERIC_ERROR_MESSAGE",
    "MessageSender",
    "NO_API_KEY_MESSAGE",
    "NO_RESPONSE_MESSAGE",
    "ReplyStatus",
    "WEBSOCKET_TIMEOUT_MESSAGE",
]
