"""
Tokenizer interface.

Splitting raw post content into a block tree is done outside this package.
The parser consumes any object with a ``tokenize(content)`` method;
``StaticTokenizer`` serves a tree produced ahead of time, for example the
JSON output of the editor's own block parser.
"""

from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from blockdata.config import BLOCK_MARKER
from blockdata.exceptions import ConfigurationError
from blockdata.models import ParsedBlock
from blockdata.registry import load_data_file


class Tokenizer(Protocol):
    """Turns post content into a list of parsed blocks."""

    def tokenize(self, content: str) -> list[ParsedBlock]: ...


class StaticTokenizer:
    """Returns the same pre-tokenized block list for any content."""

    def __init__(self, blocks: list[ParsedBlock]):
        self._blocks = list(blocks)

    @classmethod
    def from_data(cls, data: list[dict[str, Any]]) -> "StaticTokenizer":
        if not isinstance(data, list):
            raise ConfigurationError("Tokenized blocks must be a list")
        try:
            blocks = [ParsedBlock.model_validate(item) for item in data]
        except ValidationError as e:
            raise ConfigurationError(f"Invalid tokenized block: {e}") from e
        return cls(blocks)

    @classmethod
    def from_file(cls, path: Path | str) -> "StaticTokenizer":
        return cls.from_data(load_data_file(path))

    def tokenize(self, content: str) -> list[ParsedBlock]:
        return [block.model_copy(deep=True) for block in self._blocks]


def has_blocks(content: str, marker: str = BLOCK_MARKER) -> bool:
    """Check whether content contains at least one block delimiter."""
    return marker in content
