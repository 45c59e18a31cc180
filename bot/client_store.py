"""
Client Store
ID-keyed channel, guild and message operations on top of the gateway client
"""

from typing import Any

import discord


class ClientStore:
    """Session handle used by commands to reach Discord by ID."""

    def __init__(self, client: discord.Client):
        self.client = client

    async def get_channel(self, channel_id: int) -> Any:
        """
        Get a channel, from the cache when possible.

        Args:
            channel_id: Channel ID

        Returns:
            Channel object
        """
        channel = self.client.get_channel(channel_id)
        if channel is None:
            channel = await self.client.fetch_channel(channel_id)
        return channel

    async def get_guild(self, guild_id: int) -> discord.Guild:
        """
        Get a guild, from the cache when possible.

        Args:
            guild_id: Guild ID

        Returns:
            Guild object
        """
        guild = self.client.get_guild(guild_id)
        if guild is None:
            guild = await self.client.fetch_guild(guild_id)
        return guild

    async def send_message(self, channel_id: int, text: str) -> discord.Message:
        """Send a text message to a channel."""
        channel = self.client.get_partial_messageable(channel_id)
        return await channel.send(text)

    async def delete_message(self, channel_id: int, message_id: int) -> None:
        """Delete a message from a channel."""
        channel = self.client.get_partial_messageable(channel_id)
        await channel.get_partial_message(message_id).delete()
