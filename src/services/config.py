"""Configuration loading for the financial dashboard.

Loads settings from .env file and environment variables with sensible defaults.
Validates locale and currency and provides clear error messages.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from babel import Locale, UnknownLocaleError
from babel.numbers import is_currency
from dotenv import load_dotenv

from src.services.locale_service import DEFAULT_CURRENCY, DEFAULT_LOCALE

# Map string level names to logging constants
LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass
class FinanceConfig:
    """Configuration for dashboard aggregation and display."""

    locale: str = DEFAULT_LOCALE
    """Babel locale for number grouping and month names (default: en_US)"""

    currency: str = DEFAULT_CURRENCY
    """ISO 4217 currency code for amount display (default: PHP)"""

    log_level: str = "INFO"
    """Logging level name (default: INFO)"""

    log_file: str = "logs/finance.log"
    """Path to log file (default: logs/finance.log)"""


def load_config(env_file: str = ".env") -> FinanceConfig:
    """
    Load configuration from .env file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (LOCALE, CURRENCY, LOG_LEVEL, LOG_FILE)
    2. .env file in project root
    3. Default values

    Args:
        env_file: Path to .env file (default: .env)

    Returns:
        FinanceConfig with validated settings

    Raises:
        ValueError: If locale, currency or log level is invalid

    Example:
        Create .env file:
        ```
        LOCALE=en_PH
        CURRENCY=PHP
        ```

        Then call:
        ```
        config = load_config()
        ```
    """
    # Load .env file; existing environment variables win
    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(env_path)

    locale_str = os.getenv("LOCALE", DEFAULT_LOCALE)
    currency = os.getenv("CURRENCY", DEFAULT_CURRENCY).upper()
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    log_file = os.getenv("LOG_FILE", "logs/finance.log")

    # Validate LOCALE
    try:
        Locale.parse(locale_str)
    except (UnknownLocaleError, ValueError) as e:
        raise ValueError(
            f"Invalid LOCALE '{locale_str}'. "
            f"Use a babel locale identifier such as 'en_US'. Error: {str(e)}"
        ) from e

    # Validate CURRENCY
    if not is_currency(currency):
        raise ValueError(
            f"Invalid CURRENCY '{currency}'. Use an ISO 4217 code such as 'PHP'."
        )

    # Validate LOG_LEVEL
    if log_level not in LOG_LEVEL_MAP:
        raise ValueError(
            f"Invalid LOG_LEVEL '{log_level}'. "
            f"Expected one of: {', '.join(LOG_LEVEL_MAP)}"
        )

    return FinanceConfig(
        locale=locale_str,
        currency=currency,
        log_level=log_level,
        log_file=log_file,
    )


__all__ = ["LOG_LEVEL_MAP", "FinanceConfig", "load_config"]
