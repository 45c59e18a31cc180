"""
Entry point for the Discord bot.
"""

import asyncio
import logging
import sys

from bot.client import run_bot
from bot.config import config
from utils.logger import get_logger, set_log_level

logger = get_logger("Main")


def main():
    """Main entry point."""
    if config.DEBUG:
        set_log_level(logging.DEBUG)

    try:
        logger.info("Starting Diskord Bot...")
        asyncio.run(run_bot())
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
