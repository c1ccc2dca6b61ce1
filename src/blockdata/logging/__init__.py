"""
Blockdata Logging Module.

Provides structured logging with Rich console output.
"""

from blockdata.logging.config import (
    console,
    get_logger,
    setup_logging,
)
from blockdata.logging.formatters import (
    CompactFormatter,
    JSONFormatter,
    create_file_handler,
    log_context,
    record_context,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "console",
    "JSONFormatter",
    "CompactFormatter",
    "create_file_handler",
    "log_context",
    "record_context",
]
