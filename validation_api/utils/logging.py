"""
Logging utilities for the request validation API.

Handlers and format are configured once by ``logging.basicConfig`` in
main.py; module loggers only propagate to the root logger.

Logging rules:
- NEVER log raw request bodies above DEBUG (they may carry names and emails)
- Validation failures are client errors: log them at INFO, never as ERROR
- Field names and violation counts are fine to log
"""

import logging
from typing import Optional


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get the logger for a module.

    Args:
        name: Module name (typically __name__)
        level: Optional level override; by default the root level applies

    Usage:
        >>> from validation_api.utils.logging import get_logger
        >>> logger = get_logger(__name__)
    """
    logger = logging.getLogger(name)

    if level is not None:
        logger.setLevel(level)

    return logger
