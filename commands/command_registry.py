"""
Command Registry
Ordered command registration and message dispatch
"""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

import discord

from bot.client_store import ClientStore
from commands.message_context import MessageContext
from utils.logger import get_logger

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """A unit of behavior run against every inbound message."""

    name: str = "command"

    @abstractmethod
    async def action(self, context: T) -> None:
        """Act on a message context."""


class CommandRegistry:
    """Append-only list of commands, dispatched in registration order."""

    def __init__(self):
        self.logger = get_logger("CommandRegistry")
        self._commands: List[Command[MessageContext]] = []

    def register(self, command: Command[MessageContext]) -> "CommandRegistry":
        """
        Register a command.

        Args:
            command: Command to append

        Returns:
            Self for chaining
        """
        self._commands.append(command)
        self.logger.debug(f"Registered command: {command.name}")
        return self

    async def dispatch(self, message: discord.Message, clients: ClientStore) -> None:
        """
        Run every registered command against a message.

        One context is shared by all commands. Commands run one after
        another; an exception stops the dispatch and propagates.

        Args:
            message: Inbound message
            clients: Client store for replies and lookups
        """
        context = MessageContext(message, clients)
        for command in self._commands:
            await command.action(context)

    def get_all(self) -> List[Command[MessageContext]]:
        """
        Get all registered commands.

        Returns:
            List of commands in registration order
        """
        return list(self._commands)

    def __len__(self) -> int:
        return len(self._commands)
