"""Configuration settings for the account statement PDF generator."""

import os
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Dict, Any, Optional

# File Paths (resolved against the current working directory)
INPUT_FILE = os.getenv("STATEMENT_INPUT_FILE", "account_statement.json")
OUTPUT_FILE = os.getenv("STATEMENT_OUTPUT_FILE", "account_statement.pdf")
LOGO_FILE = os.getenv("STATEMENT_LOGO_FILE", "logo.png")

# Viewer Configuration
OPEN_VIEWER = os.getenv("OPEN_VIEWER", "True").lower() == "true"

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = os.getenv("LOG_FILE")

# Currency Configuration
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")


def parse_source_date_epoch(value: Optional[str]) -> Optional[datetime]:
    """Convert a SOURCE_DATE_EPOCH value into a UTC datetime.

    Returns None when the value is unset or not an integer.
    """
    if not value:
        return None
    try:
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None


@dataclass
class Settings:
    """Configuration settings class."""

    # Files
    input_file: str = INPUT_FILE
    output_file: str = OUTPUT_FILE
    logo_file: str = LOGO_FILE

    # Output Configuration
    open_viewer: bool = OPEN_VIEWER
    currency_symbol: str = CURRENCY_SYMBOL
    creation_date: Optional[datetime] = None

    # Logging
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT
    log_file: Optional[str] = LOG_FILE

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables."""
        return cls(
            input_file=os.getenv("STATEMENT_INPUT_FILE", "account_statement.json"),
            output_file=os.getenv("STATEMENT_OUTPUT_FILE", "account_statement.pdf"),
            logo_file=os.getenv("STATEMENT_LOGO_FILE", "logo.png"),
            open_viewer=os.getenv("OPEN_VIEWER", "True").lower() == "true",
            currency_symbol=os.getenv("CURRENCY_SYMBOL", "$"),
            creation_date=parse_source_date_epoch(os.getenv("SOURCE_DATE_EPOCH")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", LOG_FORMAT),
            log_file=os.getenv("LOG_FILE"),
        )

    def validate(self) -> bool:
        """Validate settings."""
        return (
            len(self.input_file) > 0 and
            len(self.output_file) > 0 and
            len(self.logo_file) > 0 and
            len(self.currency_symbol) > 0
        )

    def get_log_level(self) -> str:
        """Get log level as string."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level.upper() in valid_levels:
            return self.log_level.upper()
        return "INFO"

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create settings from dictionary."""
        return cls(**data)

    def update(self, data: Dict[str, Any]) -> None:
        """Update settings from dictionary.

        Keys that are not settings fields, and None values, are ignored.
        """
        for key, value in data.items():
            if value is not None and hasattr(self, key):
                setattr(self, key, value)

    def clone(self) -> "Settings":
        """Create a copy of settings."""
        return self.from_dict(self.to_dict())
