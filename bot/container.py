"""
Dependency container holding the process-wide singletons.
"""

from functools import cached_property
from typing import TYPE_CHECKING

from bot.client_store import ClientStore
from commands.command_dispatcher import CommandDispatcher
from commands.command_registry import CommandRegistry
from commands.ping_command import PingCommand

if TYPE_CHECKING:
    from bot.client import DiskordBot


class Container:
    """
    Builds the gateway client, client store, command registry and
    dispatcher on first access and hands out the same instance afterwards.
    """

    def __init__(self, token: str):
        self.token = token

    @cached_property
    def client(self) -> "DiskordBot":
        from bot.client import DiskordBot

        return DiskordBot()

    @cached_property
    def clients(self) -> ClientStore:
        return ClientStore(self.client)

    @cached_property
    def registry(self) -> CommandRegistry:
        return CommandRegistry().register(PingCommand())

    @cached_property
    def dispatcher(self) -> CommandDispatcher:
        return CommandDispatcher(self.clients, self.registry)
