"""
Logging helpers for Forthic.

Wraps the standard library logging so every logger lives under the
"forthic." namespace. Handlers are left to the application.

Example:
    >>> from forthic.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing %d characters", 42)
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name, prefixed with "forthic." if needed."""
    if not (name == "forthic" or name.startswith("forthic.")):
        name = f"forthic.{name}"
    return logging.getLogger(name)
