"""
Usage recording for parse calls.
"""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class UsageRecorder(Protocol):
    """Fire-and-forget usage sink."""

    def record_usage(self) -> None: ...


class LoggingUsageRecorder:
    """Records usage as debug log lines."""

    def record_usage(self) -> None:
        logger.debug("Block data parse requested")
