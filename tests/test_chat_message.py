"""Tests for supportkit.chat.message."""

from datetime import datetime, timezone

from supportkit.chat.message import ChatMessage, MessageSender


class TestChatMessage:
    def test_user_constructor(self):
        m = ChatMessage.user("hello")
        assert m.text == "hello"
        assert m.sender is MessageSender.USER
        assert m.is_user and not m.is_bot

    def test_bot_constructor(self):
        m = ChatMessage.bot("hi there")
        assert m.sender is MessageSender.BOT
        assert m.is_bot and not m.is_user

    def test_timestamp_defaults_to_now_utc(self):
        before = datetime.now(timezone.utc)
        m = ChatMessage.user("x")
        after = datetime.now(timezone.utc)
        assert before <= m.timestamp <= after
        assert m.timestamp.tzinfo is not None

    def test_explicit_timestamp_kept(self):
        ts = datetime(2024, 1, 1, tzinfo=timezone.utc)
        m = ChatMessage(text="x", sender=MessageSender.BOT, timestamp=ts)
        assert m.timestamp == ts

    def test_sender_values(self):
        assert MessageSender.USER.value == "user"
        assert MessageSender.BOT.value == "bot"
