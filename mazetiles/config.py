"""
Mazetiles Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Config:
    """Library configuration loaded from environment variables."""

    # Edge length of the square tiles a maze is laid out in. Used to snap a
    # flat maze index back onto the tile that covers it.
    TILE_SIZE: int = int(os.getenv("MAZE_TILE_SIZE", "3"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.TILE_SIZE <= 0:
            raise ValueError(
                f"MAZE_TILE_SIZE must be a positive integer, got {cls.TILE_SIZE}"
            )

        if cls.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {cls.LOG_LEVEL!r}"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Mazetiles Configuration:",
            f"  Tile Size: {cls.TILE_SIZE}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
