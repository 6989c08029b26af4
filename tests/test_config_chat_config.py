"""Tests for supportkit.config.chat_config."""

import dataclasses

import pytest

from supportkit.config import (
    DEFAULT_API_ENDPOINT,
    DEFAULT_INITIAL_MESSAGE,
    DEFAULT_RESPONSE_TIMEOUT,
    ChatConfig,
    Transport,
)
from supportkit.config.settings import Settings


class TestChatConfigDefaults:
    def test_defaults(self):
        c = ChatConfig()
        assert c.api_endpoint == DEFAULT_API_ENDPOINT
        assert c.api_key is None
        assert c.title == "Support Bot"
        assert c.initial_message == DEFAULT_INITIAL_MESSAGE
        assert c.input_placeholder == "Type a message"
        assert c.response_timeout == DEFAULT_RESPONSE_TIMEOUT == 40.0
        assert c.http_timeout == 60.0

    def test_is_immutable(self):
        c = ChatConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.api_key = "sk-new"


class TestChatConfigValidation:
    @pytest.mark.parametrize("endpoint", ["", "   "])
    def test_empty_endpoint_rejected(self, endpoint):
        with pytest.raises(ValueError, match="api_endpoint is required"):
            ChatConfig(api_endpoint=endpoint)

    def test_non_positive_response_timeout_rejected(self):
        with pytest.raises(ValueError, match="response_timeout"):
            ChatConfig(response_timeout=0)

    def test_non_positive_http_timeout_rejected(self):
        with pytest.raises(ValueError, match="http_timeout"):
            ChatConfig(http_timeout=-1)


class TestTransportSelection:
    @pytest.mark.parametrize(
        "endpoint",
        ["ws://localhost:8000/chat", "wss://example/chat", "WSS://Example/Chat"],
    )
    def test_websocket_schemes(self, endpoint):
        assert ChatConfig(api_endpoint=endpoint).transport is Transport.WEBSOCKET

    @pytest.mark.parametrize(
        "endpoint",
        ["http://localhost/chat", "https://api/chat", "api.example.com/chat"],
    )
    def test_everything_else_is_http(self, endpoint):
        assert ChatConfig(api_endpoint=endpoint).transport is Transport.HTTP

    def test_unparsable_endpoint_falls_back_to_http(self):
        assert ChatConfig(api_endpoint="http://[::1/chat").transport is Transport.HTTP

    def test_has_api_key(self):
        assert ChatConfig(api_key="K").has_api_key is True
        assert ChatConfig(api_key="").has_api_key is False
        assert ChatConfig().has_api_key is False


class TestWithChanges:
    def test_overrides_only_named_fields(self):
        base = ChatConfig(api_endpoint="https://api/chat", api_key="K", title="Help")
        changed = base.with_changes(title="Support")
        assert changed.title == "Support"
        assert changed.api_key == "K"
        assert changed.api_endpoint == "https://api/chat"
        assert base.title == "Help"

    def test_revalidates(self):
        with pytest.raises(ValueError):
            ChatConfig().with_changes(api_endpoint="")


class TestFromSettings:
    def _settings(self, **kwargs):
        return Settings(_env_file=None, **kwargs)

    def test_maps_settings_fields(self):
        s = self._settings(
            API_ENDPOINT="wss://bot/chat",
            API_KEY="sk-test",
            RESPONSE_TIMEOUT=5.0,
            HTTP_TIMEOUT=7.5,
        )
        c = ChatConfig.from_settings(s)
        assert c.api_endpoint == "wss://bot/chat"
        assert c.api_key == "sk-test"
        assert c.response_timeout == 5.0
        assert c.http_timeout == 7.5

    def test_empty_key_becomes_none(self):
        c = ChatConfig.from_settings(self._settings(API_KEY=""))
        assert c.api_key is None

    def test_overrides_win_and_none_is_ignored(self):
        s = self._settings(API_ENDPOINT="https://a/chat", API_KEY="from-env")
        c = ChatConfig.from_settings(s, api_endpoint="https://b/chat", api_key=None)
        assert c.api_endpoint == "https://b/chat"
        assert c.api_key == "from-env"
