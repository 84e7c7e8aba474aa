"""Package logger configuration for funcmode.

The combinators log at DEBUG level only where something is created or used up
(bound methods, one-shot predicates, backward scans), never per element.
"""

import logging
import os
import sys
import typing as tp

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "funcmode",
    level: str | None = None,
    format_string: str | None = None,
    stream: tp.TextIO | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (``funcmode`` or one of its children)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls back to
            ``FUNCMODE_LOG_LEVEL``, then ``LOG_LEVEL``, then INFO.
        format_string: Custom format string
        stream: Output stream, stdout when omitted

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("FUNCMODE_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


logger = setup_logger()
