"""
Command system for the Discord bot.
"""

from .command_registry import Command, CommandRegistry
from .command_dispatcher import CommandDispatcher
from .message_context import MessageContext
from .ping_command import PingCommand

__all__ = [
    "Command",
    "CommandRegistry",
    "CommandDispatcher",
    "MessageContext",
    "PingCommand",
]
