"""
Blockdata Exceptions.

Centralized exception hierarchy for the application. Errors that reach the
caller of ``ContentParser.parse`` carry an error code and a transport status.
"""


class BlockDataError(Exception):
    """Base exception for all blockdata errors."""

    code = "error"
    status = 500

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(BlockDataError):
    """Raised when a registry, metadata or block file is invalid or missing."""

    code = "configuration-error"


class InvalidParamsError(BlockDataError):
    """Raised when caller-supplied options contradict each other."""

    code = "invalid-params"
    status = 400


class NoBlocksError(BlockDataError):
    """Raised when content has no block markers at all."""

    code = "no-blocks"
    status = 400


class ParserError(BlockDataError):
    """Raised when tokenizing or sourcing fails unexpectedly."""

    code = "parser-error"
    status = 500
