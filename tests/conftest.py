"""Shared fakes for gateway objects."""

from unittest.mock import AsyncMock, MagicMock

import pytest


def make_message(content: str, message_id: int = 1001, channel_id: int = 2002) -> MagicMock:
    """Build a stand-in for discord.Message."""
    message = MagicMock()
    message.id = message_id
    message.content = content
    message.channel.id = channel_id
    return message


@pytest.fixture
def clients():
    """ClientStore stand-in with awaitable operations."""
    store = MagicMock()
    store.get_channel = AsyncMock()
    store.get_guild = AsyncMock()
    store.send_message = AsyncMock()
    store.delete_message = AsyncMock()
    return store
