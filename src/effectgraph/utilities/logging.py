"""Logging utilities for effectgraph."""

import logging
from typing import Literal, Union

from rich.console import Console
from rich.logging import RichHandler

_LOG_NAMESPACE = "EffectGraph"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger nested under the EffectGraph namespace.

    Args:
        name: The name of the logger, which will be prefixed with 'EffectGraph.'

    Returns:
        logging.Logger: A logger instance.
    """
    return logging.getLogger(f"{_LOG_NAMESPACE}.{name}")


def configure_logging(
    level: Union[LogLevel, str, int] = "INFO",
    rich_tracebacks: bool = True,
) -> None:
    """
    Configure logging for effectgraph.

    Args:
        level: The log level to use (string or int).
        rich_tracebacks: Render exception tracebacks with rich.
    """
    logger = logging.getLogger(_LOG_NAMESPACE)
    # Reconfiguring must not stack handlers
    for hdlr in logger.handlers[:]:
        logger.removeHandler(hdlr)

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=rich_tracebacks,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    if isinstance(level, str):
        level = level.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {level}")
        logger.setLevel(getattr(logging, level))
    else:
        logger.setLevel(level)
