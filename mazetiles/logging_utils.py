"""Logging utilities for maze assembly.

Provides color-coded output to distinguish placement, rendering and error messages.
"""

import os
from enum import Enum

from .config import Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Debug detail (dropped tiles)
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    RESET = "\033[0m"


def colored(text: str, color: Color) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply

    Returns:
        Colorized text if MAZETILES_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("MAZETILES_NO_COLOR"):
        return text

    return f"{color.value}{text}{Color.RESET.value}"


def log_debug(message: str) -> None:
    """Log debug detail (blue). Silent unless LOG_LEVEL=DEBUG."""
    if Config.LOG_LEVEL == "DEBUG":
        print(colored(f"{LOG_TAG_DEBUG} {message}", Color.BLUE))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))


# Markers for message types (color-blind accessible)
LOG_TAG_DEBUG = "[•]"
LOG_TAG_ERROR = "[!]"
LOG_TAG_SUCCESS = "[✓]"
LOG_TAG_INFO = "[i]"
