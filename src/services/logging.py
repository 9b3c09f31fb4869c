"""Logging configuration for the financial dashboard.

Output goes to stdout and to the file named by ``FinanceConfig.log_file``, at
``FinanceConfig.log_level``. Set LOG_LEVEL=DEBUG to trace every period
aggregation.
"""

import logging
import sys
from pathlib import Path

from src.services.config import LOG_LEVEL_MAP, FinanceConfig, load_config

LOG_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: FinanceConfig | None = None) -> FinanceConfig:
    """
    Configure the root logger from dashboard settings.

    Args:
        config: Settings to apply (default: load_config(), i.e. .env and environment)

    Returns:
        The config that was applied, so callers can reuse it for DashboardService

    Raises:
        ValueError: If config.log_level is not a known level name
    """
    config = config or load_config()
    level_name = config.log_level.upper()
    if level_name not in LOG_LEVEL_MAP:
        raise ValueError(
            f"Invalid LOG_LEVEL '{config.log_level}'. "
            f"Expected one of: {', '.join(LOG_LEVEL_MAP)}"
        )
    log_level = LOG_LEVEL_MAP[level_name]

    log_path = Path(config.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Replace, never stack, handlers from an earlier setup
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    for handler in (logging.StreamHandler(sys.stdout), logging.FileHandler(log_path)):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s file=%s locale=%s currency=%s",
        level_name,
        log_path,
        config.locale,
        config.currency,
    )
    return config


__all__ = ["LOG_FORMAT", "DATE_FORMAT", "setup_logging"]
