"""
Blockdata Configuration.

Centralizes default values and configuration settings.
"""

import os

from pydantic import BaseModel, Field

# Block content detection
BLOCK_MARKER = "<!-- wp:"

# Debug output
DEBUG_ENV_VAR = "BLOCKDATA_PARSE_DEBUG"
TRUTHY_VALUES = {"1", "true", "yes", "on"}

# Fragment wrapper so the HTML5 parser treats inner HTML like a full document
DOCUMENT_TEMPLATE = "<!doctype html><html><body>{}</body></html>"

MISSING_BLOCK_WARNING = (
    'Block type "{}" is not server-side registered. '
    "Sourced block attributes will not be available."
)


def debug_from_env() -> bool:
    """Read the debug flag from the environment."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() in TRUTHY_VALUES


class ParserConfig(BaseModel):
    """Content parser configuration."""

    debug: bool = Field(default_factory=debug_from_env)
    block_marker: str = BLOCK_MARKER
