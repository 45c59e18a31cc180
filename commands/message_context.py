"""
Message Context
Per-dispatch wrapper around an inbound message and the client store
"""

from typing import Any, Optional

import discord

from bot.client_store import ClientStore


class MessageContext:
    """A message plus the session handle, valid for one dispatch call."""

    def __init__(self, message: discord.Message, clients: ClientStore):
        self.message = message
        self.clients = clients

    @property
    def content(self) -> str:
        return self.message.content

    @property
    def channel_id(self) -> int:
        return self.message.channel.id

    async def get_channel(self) -> Any:
        """Get the channel the message was sent in."""
        return await self.clients.get_channel(self.channel_id)

    async def get_guild(self) -> Optional[discord.Guild]:
        """Get the guild of the message's channel, None for DMs."""
        channel = await self.get_channel()
        guild = getattr(channel, "guild", None)
        if guild is None:
            return None
        return await self.clients.get_guild(guild.id)

    async def reply(self, text: str) -> discord.Message:
        """Send text to the channel the message came from."""
        return await self.clients.send_message(self.channel_id, text)

    async def delete(self) -> None:
        """Delete the message."""
        await self.clients.delete_message(self.channel_id, self.message.id)
