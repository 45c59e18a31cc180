"""Tests for MessageContext."""

from unittest.mock import MagicMock

import pytest

from commands.message_context import MessageContext
from conftest import make_message


class TestMessageContext:
    """Tests for MessageContext accessors."""

    def test_content_and_channel_id(self, clients):
        context = MessageContext(make_message("hello", channel_id=7), clients)
        assert context.content == "hello"
        assert context.channel_id == 7

    @pytest.mark.asyncio
    async def test_get_channel(self, clients):
        channel = MagicMock()
        clients.get_channel.return_value = channel
        context = MessageContext(make_message("hi", channel_id=7), clients)

        assert await context.get_channel() is channel
        clients.get_channel.assert_awaited_once_with(7)

    @pytest.mark.asyncio
    async def test_get_guild(self, clients):
        channel = MagicMock()
        channel.guild.id = 99
        guild = MagicMock()
        clients.get_channel.return_value = channel
        clients.get_guild.return_value = guild
        context = MessageContext(make_message("hi"), clients)

        assert await context.get_guild() is guild
        clients.get_guild.assert_awaited_once_with(99)

    @pytest.mark.asyncio
    async def test_get_guild_none_for_dm(self, clients):
        clients.get_channel.return_value = MagicMock(spec=["id", "recipient"])
        context = MessageContext(make_message("hi"), clients)

        assert await context.get_guild() is None
        clients.get_guild.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_reply(self, clients):
        context = MessageContext(make_message("hi", channel_id=5), clients)
        await context.reply("text")
        clients.send_message.assert_awaited_once_with(5, "text")

    @pytest.mark.asyncio
    async def test_delete(self, clients):
        context = MessageContext(make_message("hi", message_id=11, channel_id=5), clients)
        await context.delete()
        clients.delete_message.assert_awaited_once_with(5, 11)
