"""
Ping Command
Replies "Pong!" to messages starting with "!ping"
"""

from commands.command_registry import Command
from commands.message_context import MessageContext

PREFIX = "!ping"
REPLY = "Pong!"


class PingCommand(Command[MessageContext]):
    name = "ping"

    async def action(self, context: MessageContext) -> None:
        if context.content.startswith(PREFIX):
            await context.reply(REPLY)
