"""Configuration management for shelfdesk.

Loads configuration from environment variables and provides defaults.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """Application configuration."""

    # Catalog / registry
    strict: bool  # Raise on null or duplicate records

    # Logging
    log_level: str

    # Theater
    theater_rows: int
    theater_cols: int

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            strict=os.environ.get("SHELFDESK_STRICT", "false").strip().lower() in _TRUE_VALUES,
            log_level=os.environ.get("SHELFDESK_LOG_LEVEL", "WARNING").strip().upper(),
            theater_rows=int(os.environ.get("SHELFDESK_THEATER_ROWS", "5")),
            theater_cols=int(os.environ.get("SHELFDESK_THEATER_COLS", "8")),
        )

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown log level: {self.log_level}")
        if self.theater_rows < 1 or self.theater_cols < 1:
            errors.append(
                f"Theater must have at least one seat: {self.theater_rows}x{self.theater_cols}"
            )

        return errors


def configure_logging(config: Optional[Config] = None) -> None:
    """Set up root logging at the configured level."""
    config = config or get_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
