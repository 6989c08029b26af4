"""supportkit configuration -- environment settings and the chat endpoint config."""

from .chat_config import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_INITIAL_MESSAGE,
    DEFAULT_INPUT_PLACEHOLDER,
    DEFAULT_RESPONSE_TIMEOUT,
    DEFAULT_TITLE,
    ChatConfig,
    Transport,
)
from .settings import DEFAULT_API_ENDPOINT

__all__ = [
    "ChatConfig",
    "DEFAULT_API_ENDPOINT",
    "DEFAULT_HTTP_TIMEOUT",
    "DEFAULT_INITIAL_MESSAGE",
    "DEFAULT_INPUT_PLACEHOLDER",
    "DEFAULT_RESPONSE_TIMEOUT",
    "DEFAULT_TITLE",
    "Transport",
]
