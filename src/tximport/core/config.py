#!/usr/bin/env python3
"""
Configuration Management for the Transaction Importer

Handles environment-based configuration with sensible defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dotenv import load_dotenv

from .currency import CURRENCY_FORMATS
from .dates import DATE_FORMATS

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class ImportConfig:
    """Defaults applied to new import sessions."""

    date_format: int = 0
    currency_format: int = 0
    multi_split: bool = False
    base_currency: str = "USD"


@dataclass
class Config:
    """
    Main configuration class for the importer.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment
    importer: ImportConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("TXIMPORT_ENV", "development"))

        importer = ImportConfig(
            date_format=int(os.getenv("TXIMPORT_DATE_FORMAT", "0")),
            currency_format=int(os.getenv("TXIMPORT_CURRENCY_FORMAT", "0")),
            multi_split=os.getenv("TXIMPORT_MULTI_SPLIT", "false").lower() == "true",
            base_currency=os.getenv("TXIMPORT_BASE_CURRENCY", "USD").strip().upper(),
        )

        return cls(
            environment=env,
            importer=importer,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not 0 <= self.importer.date_format < len(DATE_FORMATS):
            errors.append(f"Date format must be 0-{len(DATE_FORMATS) - 1}, got {self.importer.date_format}")

        if self.importer.currency_format not in CURRENCY_FORMATS:
            errors.append(
                f"Currency format must be one of {list(CURRENCY_FORMATS)}, got {self.importer.currency_format}"
            )

        if not self.importer.base_currency:
            errors.append("Base currency can't be empty")

        if not isinstance(getattr(logging, self.log_level, None), int):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)
        if self.debug:
            level = logging.DEBUG

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment.value,
            "importer": dict(self.importer.__dict__),
            "debug": self.debug,
            "log_level": self.log_level,
        }


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        # Validate configuration
        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
