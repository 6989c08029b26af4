"""Chat transports -- wire envelopes and the WebSocket session client."""

from supportkit.transport.envelopes import (
    ChatCompletionRequest,
    ChatTurn,
    InboundEnvelope,
    extract_completion_text,
    parse_inbound_frame,
)
from supportkit.transport.websocket_client import ChatWebSocketClient

__all__ = [
    "ChatCompletionRequest",
    "ChatTurn",
    "ChatWebSocketClient",
    "InboundEnvelope",
    "extract_completion_text",
    "parse_inbound_frame",
]
