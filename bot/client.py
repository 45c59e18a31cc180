"""
Discord bot client setup using discord.py.
"""

import logging
import sys
from typing import Optional

import discord
from discord.ext import commands

from bot.config import config
from bot.container import Container
from bot.credentials import load_bot_token
from utils.error_handler import get_error_handler, setup_error_handler
from utils.logger import get_logger, setup_logging

logger = get_logger("Client")


class DiskordBot(commands.Bot):
    """Gateway client; message handling lives in the attached dispatcher."""

    def __init__(self):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(
            command_prefix=commands.when_mentioned,
            help_command=None,
            intents=intents,
        )

    async def setup_hook(self):
        """Called when bot is starting up."""
        logger.info("Setting up bot...")

    async def on_message(self, message: discord.Message):
        """Messages are handled by the dispatcher listener only."""

    async def on_ready(self):
        """Called when bot is ready."""
        logger.info(f"Logged in as: {self.user}")

    async def on_error(self, event_method: str, /, *args, **kwargs):
        """Report exceptions escaping event handlers, command dispatch included."""
        # Called from inside the library's except block
        get_error_handler().handle_exception(sys.exc_info()[1], event_method)


# Global container instance
container: Optional[Container] = None


def create_bot(bot_container: Container) -> DiskordBot:
    """Return the container's client with the dispatcher listening for messages."""
    bot = bot_container.client
    bot.add_listener(bot_container.dispatcher.on_message_create, "on_message")
    return bot


async def run_bot():
    """Run the bot."""
    global container

    # Validate config
    config.validate()

    # Fatal when missing: nothing below runs without a token
    token = load_bot_token(config.TOKEN_FILE)

    setup_logging("discord", logging.WARNING)

    container = Container(token)
    bot = create_bot(container)

    setup_error_handler(on_shutdown=bot.close)

    try:
        async with bot:
            await bot.start(container.token)
    except Exception as e:
        logger.error(f"Bot error: {e}")
        raise
