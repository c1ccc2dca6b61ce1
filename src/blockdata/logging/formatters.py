"""
Log Formatters - Structured output carrying post and block context.

Parser and sourcer log calls attach context through ``extra=log_context(...)``;
the formatters below render whatever context a record carries.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

CONTEXT_FIELDS = ("post_id", "block_name")


def log_context(post_id: int | None = None, block_name: str | None = None) -> dict[str, Any]:
    """Build the ``extra`` mapping for a log call about a post or block."""
    return {"post_id": post_id, "block_name": block_name}


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Context fields set on a record, skipping empty ones."""
    context = {}
    for field in CONTEXT_FIELDS:
        value = getattr(record, field, None)
        if value is not None:
            context[field] = value
    return context


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record, for log files and aggregation.

    Fields: timestamp, level, logger, message, then ``post_id`` and
    ``block_name`` when the record carries them, then ``exception``.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(record_context(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class CompactFormatter(logging.Formatter):
    """
    Single-line console output: ``12:00:00 ⚠ [post 5 core/quote] message``.
    """

    LEVEL_SYMBOLS = {
        "DEBUG": "·",
        "INFO": "→",
        "WARNING": "⚠",
        "ERROR": "✗",
        "CRITICAL": "☠",
    }

    def format(self, record: logging.LogRecord) -> str:
        symbol = self.LEVEL_SYMBOLS.get(record.levelname, "?")
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        context = record_context(record)
        labels = []
        if "post_id" in context:
            labels.append(f"post {context['post_id']}")
        if "block_name" in context:
            labels.append(context["block_name"])
        prefix = f"[{' '.join(labels)}] " if labels else ""

        return f"{timestamp} {symbol} {prefix}{record.getMessage()}"


def create_file_handler(
    path: str | Path,
    formatter: logging.Formatter | None = None,
    level: int = logging.DEBUG,
) -> logging.FileHandler:
    """
    Append JSON lines to a log file, creating its directory if needed.

    Args:
        path: Log file path
        formatter: Log formatter (defaults to JSONFormatter)
        level: Logging level
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(formatter or JSONFormatter())
    return handler
