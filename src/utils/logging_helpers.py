"""
Logging helper utilities for the containers resolver.

Provides consistent formatting for multi-line warnings and per-call trace
verbosity.
"""

import logging
from typing import List, Optional


def trace_level(is_debug: bool) -> int:
    """
    Level for a call's pipeline trace messages.

    Debug calls log their trace at INFO so it shows under the host's usual
    configuration; other calls keep it at DEBUG. No logger level is changed,
    so concurrent callers do not affect each other.

    Args:
        is_debug: Debug flag of the current call

    Returns:
        logging.INFO or logging.DEBUG
    """
    return logging.INFO if is_debug else logging.DEBUG


def log_warning_section(
    title: str,
    messages: List[str],
    logger: Optional[logging.Logger] = None,
    width: int = 60
) -> None:
    """
    Log a warning section with separator lines and multiple messages.

    Args:
        title: Title message for the warning section
        messages: List of warning messages to display
        logger: Logger instance (defaults to root logger if not provided)
        width: Width of separator line in characters

    Examples:
        >>> log_warning_section(
        ...     "Cleanup incomplete",
        ...     ["Could not delete /tmp/extract-1: Permission denied"]
        ... )
        ============================================================
        Cleanup incomplete
        Could not delete /tmp/extract-1: Permission denied
        ============================================================
    """
    if logger is None:
        logger = logging.getLogger()

    logger.warning("=" * width)
    logger.warning(title)

    for message in messages:
        logger.warning(message or "")

    logger.warning("=" * width)
