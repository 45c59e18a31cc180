"""
Command Dispatcher
Gateway listener that hands every new message to the command registry
"""

import discord

from bot.client_store import ClientStore
from commands.command_registry import CommandRegistry


class CommandDispatcher:
    """Forwards message-create events to the registry."""

    def __init__(self, clients: ClientStore, registry: CommandRegistry):
        self.clients = clients
        self.registry = registry

    async def on_message_create(self, message: discord.Message) -> None:
        await self.registry.dispatch(message, self.clients)
