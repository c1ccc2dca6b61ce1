"""
Post Metadata - Lookup interface for ``meta`` sourced attributes.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from blockdata.exceptions import ConfigurationError
from blockdata.registry import load_data_file


class MetaStore(Protocol):
    """Read access to post metadata."""

    def exists(self, post_id: int, key: str) -> bool: ...

    def get(self, post_id: int, key: str) -> Any: ...


class InMemoryMetaStore:
    """Metadata held in a dict of post id to ``{key: value}``."""

    def __init__(self, data: Mapping[int | str, Mapping[str, Any]] | None = None):
        self._data: dict[int, dict[str, Any]] = {}
        for post_id, values in (data or {}).items():
            try:
                self._data[int(post_id)] = dict(values)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid post ID in metadata: {post_id!r}") from e

    @classmethod
    def from_file(cls, path: Path | str) -> "InMemoryMetaStore":
        data = load_data_file(path)
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Metadata file {path} must contain a mapping")
        return cls(data)

    def exists(self, post_id: int, key: str) -> bool:
        return key in self._data.get(post_id, {})

    def get(self, post_id: int, key: str) -> Any:
        return self._data.get(post_id, {}).get(key)


class EmptyMetaStore:
    """Metadata store with no posts."""

    def exists(self, post_id: int, key: str) -> bool:
        return False

    def get(self, post_id: int, key: str) -> Any:
        return None
