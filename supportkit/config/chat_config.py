"""Chat endpoint configuration.

This module defines the immutable configuration value handed to a
:class:`~supportkit.chat.service.ChatService`: where to send messages, which
credential to present, how long to wait for a reply, and the handful of
text strings a front-end shows around the conversation.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from supportkit.config.settings import DEFAULT_API_ENDPOINT

if TYPE_CHECKING:
    from supportkit.config.settings import Settings


DEFAULT_TITLE = "Support Bot"
DEFAULT_INITIAL_MESSAGE = "Hi! How can I help you?"
DEFAULT_INPUT_PLACEHOLDER = "Type a message"
DEFAULT_RESPONSE_TIMEOUT = 40.0
DEFAULT_HTTP_TIMEOUT = 60.0
DEFAULT_REFERER = "supportkit"
DEFAULT_CLIENT_TITLE = "Chat Widget"

_WEBSOCKET_SCHEMES = frozenset({"ws", "wss"})


class Transport(str, Enum):
    """Wire transport selected from the endpoint URL scheme."""

    HTTP = "http"
    WEBSOCKET = "websocket"


@dataclass(frozen=True)
class ChatConfig:
    """Configuration for a chat backend connection.

    Attributes:
        api_endpoint: Scheme-qualified URL of the chat API. ``ws://`` and
            ``wss://`` URLs are served over a WebSocket, anything else is
            sent as an HTTP POST.
        api_key: Optional static bearer credential. Required for HTTP
            endpoints; on WebSocket endpoints it becomes a URL path segment.
        title: Title a front-end displays in the chat header.
        initial_message: Greeting shown by the bot before the first exchange.
        input_placeholder: Placeholder text for the message input.
        response_timeout: Seconds to wait for a WebSocket reply envelope.
        http_timeout: Seconds allowed for a single HTTP request.
        referer: Value of the ``HTTP-Referer`` identification header.
        client_title: Value of the ``X-Title`` identification header.
    """

    api_endpoint: str = DEFAULT_API_ENDPOINT
    api_key: str | None = None
    title: str = DEFAULT_TITLE
    initial_message: str = DEFAULT_INITIAL_MESSAGE
    input_placeholder: str = DEFAULT_INPUT_PLACEHOLDER
    response_timeout: float = DEFAULT_RESPONSE_TIMEOUT
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    referer: str = DEFAULT_REFERER
    client_title: str = DEFAULT_CLIENT_TITLE

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.api_endpoint or not self.api_endpoint.strip():
            raise ValueError("api_endpoint is required")
        if self.response_timeout <= 0:
            raise ValueError("response_timeout must be greater than 0")
        if self.http_timeout <= 0:
            raise ValueError("http_timeout must be greater than 0")

    @property
    def transport(self) -> Transport:
        """Transport implied by the endpoint scheme.

        Endpoints that cannot be parsed fall back to HTTP, where the request
        itself reports the failure.
        """
        try:
            scheme = urlsplit(self.api_endpoint.strip()).scheme.lower()
        except ValueError:
            return Transport.HTTP
        if scheme in _WEBSOCKET_SCHEMES:
            return Transport.WEBSOCKET
        return Transport.HTTP

    @property
    def has_api_key(self) -> bool:
        """True when a non-empty credential is configured."""
        return bool(self.api_key)

    def with_changes(self, **changes: Any) -> ChatConfig:
        """Return a copy of this config with the given fields replaced.

        Args:
            **changes: Field names and their new values.

        Returns:
            A new, validated ChatConfig.
        """
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides: Any) -> ChatConfig:
        """Build a config from environment settings.

        Args:
            settings: Settings to read. Defaults to the module-level instance.
            **overrides: Fields that take precedence over the settings values.
        """
        if settings is None:
            from supportkit.config.settings import settings as default_settings

            settings = default_settings

        values: dict[str, Any] = {
            "api_endpoint": settings.API_ENDPOINT,
            "api_key": settings.API_KEY or None,
            "response_timeout": settings.RESPONSE_TIMEOUT,
            "http_timeout": settings.HTTP_TIMEOUT,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
