"""
Centralized logging configuration for the storefront.

Usage:
    from storefront.logging import configure_logging, get_logger
    configure_logging()  # once, at startup

    logger = get_logger(__name__)

    logger.info("Cart created")
    logger.warning("Unknown currency code", exc_info=True)
"""

import logging
import sys
from functools import cache
from typing import Optional

from storefront import config

# Default format for logs
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# Name of the handler installed by configure_logging
HANDLER_NAME = "storefront"


def _get_log_level() -> int:
    """Get log level from settings or default to INFO."""
    return getattr(logging, config.LOG_LEVEL, logging.INFO)


def configure_logging(root: Optional[logging.Logger] = None) -> None:
    """
    Attach a stdout handler to the root logger.

    Call once from the application entry point; importing storefront
    modules leaves logging configuration to the host application.

    Args:
        root: Logger to configure (defaults to the root logger)
    """
    if root is None:
        root = logging.getLogger()

    # Only configure if no handlers exist
    if root.handlers:
        return

    root.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setLevel(_get_log_level())

    # Compact format in production, detailed locally
    formatter = logging.Formatter(LOG_FORMAT_SIMPLE if config.IS_PRODUCTION else LOG_FORMAT)
    handler.setFormatter(formatter)

    root.addHandler(handler)


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def _escape_log_injection(value: str) -> str:
    """
    Escape characters that could be used for log injection attacks (CWE-117).

    Args:
        value: String to escape

    Returns:
        Escaped string safe for logging
    """
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: str | None) -> str:
    """
    Sanitize an identifier for logging (first 8 chars, injection-escaped).

    Args:
        id_value: ID value to sanitize (can be None)

    Returns:
        Sanitized ID string or "N/A" if empty
    """
    if not id_value:
        return "N/A"
    safe_value = _escape_log_injection(str(id_value))
    return safe_value[:8] if len(safe_value) > 8 else safe_value


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Sanitize a user-supplied string for logging.

    Escapes log injection characters and truncates to max_length.

    Args:
        value: String value to sanitize (can be None)
        max_length: Maximum length to keep (default: 50)

    Returns:
        Sanitized string or "N/A" if empty
    """
    if not value:
        return "N/A"
    safe_value = _escape_log_injection(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "HANDLER_NAME",
    "configure_logging",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
