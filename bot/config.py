"""
Configuration management for the Discord bot.
Loads environment variables and provides configuration settings.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent

# Load environment variables from .env file
env_path = PROJECT_ROOT / ".env"
load_dotenv(dotenv_path=env_path)

DEFAULT_TOKEN_FILE = str(PROJECT_ROOT / ".bot-token")


@dataclass(frozen=True)
class Config:
    """Bot configuration settings."""

    # Plain-text file holding the bot token
    TOKEN_FILE: str = DEFAULT_TOKEN_FILE

    # Debug
    DEBUG: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            TOKEN_FILE=os.getenv("BOT_TOKEN_FILE", DEFAULT_TOKEN_FILE),
            DEBUG=os.getenv("DEBUG", "false").lower() == "true",
        )

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.TOKEN_FILE:
            raise ValueError("BOT_TOKEN_FILE must not be empty")


# Global config instance
config = Config.from_env()
