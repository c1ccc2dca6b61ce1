"""
Logging Configuration - Structured logging with Rich console.

Provides readable console logging for parse runs, or machine-readable
output when piping results elsewhere.
"""

import logging
import sys
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from blockdata.logging.formatters import CompactFormatter, JSONFormatter

# Custom theme for blockdata logs
BLOCKDATA_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim",
        "block": "bold green",
    }
)

# Logs go to stderr so JSON results on stdout stay clean
console = Console(theme=BLOCKDATA_THEME, stderr=True)

LogFormat = Literal["rich", "json", "compact"]


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO",
    fmt: LogFormat = "rich",
    show_path: bool = False,
) -> logging.Handler:
    """
    Configure logging for the blockdata logger tree.

    Args:
        level: Logging level
        fmt: "rich" console output, or "json"/"compact" lines on stderr
        show_path: Show file path in rich log messages

    Returns:
        The installed handler
    """
    if fmt == "rich":
        handler: logging.Handler = RichHandler(
            console=console,
            show_time=True,
            show_level=True,
            show_path=show_path,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JSONFormatter() if fmt == "json" else CompactFormatter())

    blockdata_logger = logging.getLogger("blockdata")
    blockdata_logger.setLevel(level)
    blockdata_logger.handlers = [handler]
    blockdata_logger.propagate = False

    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with blockdata prefix.

    Args:
        name: Logger name (will be prefixed with 'blockdata.')

    Returns:
        Configured logger
    """
    if not name.startswith("blockdata."):
        name = f"blockdata.{name}"
    return logging.getLogger(name)
