"""Logging utilities for mcpgate."""

import logging
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: LogLevel = "INFO") -> None:
    """Configure logging for mcpgate.

    Log records go to stderr; stdout is reserved for the protocol stream.

    Args:
        level: the log level to use
    """
    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
    )
