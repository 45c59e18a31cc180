"""
Bot token loading.
"""

from pathlib import Path
from typing import Union

from utils.logger import get_logger

logger = get_logger("Credentials")


class TokenLoadError(RuntimeError):
    """The bot token could not be read. Fatal at startup."""


def load_bot_token(path: Union[str, Path]) -> str:
    """
    Read the bot token from a plain-text file.

    Args:
        path: Location of the token file

    Returns:
        The token with surrounding whitespace removed

    Raises:
        TokenLoadError: The file is missing, unreadable or empty
    """
    token_path = Path(path)
    message = (
        "Failed to load the bot token. Make sure a readable file named "
        f".bot-token exists at {token_path}."
    )

    try:
        token = token_path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        raise TokenLoadError(message) from e

    if not token:
        raise TokenLoadError(f"{message} The file is empty.")

    logger.debug(f"Loaded bot token from {token_path}")
    return token
