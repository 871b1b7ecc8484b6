"""
Centralized logging configuration for the storefront.

Usage:
    from storefront.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Cart reconciled")
    logger.error("Checkout failed", exc_info=True)
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_log_level() -> int:
    """Get log level from environment or default to WARNING."""
    level_name = os.environ.get("LOG_LEVEL", "WARNING").upper()
    return getattr(logging, level_name, logging.WARNING)


def configure_logging() -> None:
    """Configure the root logger once; later calls are no-ops."""
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_get_log_level())

    # stderr keeps CLI output on stdout clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_get_log_level())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # supabase-py logs every HTTP request through httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value: object) -> str:
    """
    Truncate an id to its first 8 characters for log lines.

    Newlines and carriage returns are escaped so a crafted value cannot
    forge extra log entries.
    """
    if not id_value:
        return "N/A"
    safe_value = str(id_value).replace("\n", "\\n").replace("\r", "\\r")
    return safe_value[:8]


__all__ = ["LOG_FORMAT", "configure_logging", "get_logger", "sanitize_id_for_logging"]
