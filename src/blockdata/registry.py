"""
Block Type Registry - Read-only snapshot of block attribute definitions.

The parser never registers block types itself; it receives a registry built
from whatever the host system has registered and reads it via ``get_all()``.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol

import yaml
from pydantic import ValidationError

from blockdata.exceptions import ConfigurationError
from blockdata.models import BlockTypeDefinition

logger = logging.getLogger(__name__)


class BlockTypeSource(Protocol):
    """Anything that can hand out the registered block types."""

    def get_all(self) -> dict[str, BlockTypeDefinition]: ...


class BlockTypeRegistry:
    """
    Immutable mapping of block name to block type definition.

    Usage:
        registry = BlockTypeRegistry.from_mapping({
            "core/image": {"attributes": {"url": {"source": "attribute", ...}}},
        })
        registry.get_all()["core/image"].attributes["url"]
    """

    def __init__(self, definitions: Iterable[BlockTypeDefinition] = ()):
        self._definitions: dict[str, BlockTypeDefinition] = {
            definition.name: definition for definition in definitions
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | list[dict[str, Any]]) -> "BlockTypeRegistry":
        """
        Build a registry from plain data.

        Accepts either ``{name: {"attributes": {...}}}`` or a list of
        ``block.json`` style documents carrying their own ``name``.
        """
        if isinstance(data, Mapping):
            entries = [{**(body or {}), "name": name} for name, body in data.items()]
        elif isinstance(data, list):
            entries = data
        else:
            raise ConfigurationError(f"Unsupported registry data: {type(data).__name__}")

        try:
            definitions = [BlockTypeDefinition.model_validate(entry) for entry in entries]
        except ValidationError as e:
            raise ConfigurationError(f"Invalid block type definition: {e}") from e

        logger.debug(f"Loaded {len(definitions)} block type definition(s)")
        return cls(definitions)

    @classmethod
    def from_file(cls, path: Path | str) -> "BlockTypeRegistry":
        """Load a registry from a JSON or YAML file."""
        return cls.from_mapping(load_data_file(path))

    def get_all(self) -> dict[str, BlockTypeDefinition]:
        """Snapshot of all registered block types."""
        return dict(self._definitions)

    def get(self, name: str) -> BlockTypeDefinition | None:
        return self._definitions.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)


def load_data_file(path: Path | str) -> Any:
    """Load JSON or YAML data, picking the format from the file suffix."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    try:
        if path.suffix in [".yaml", ".yml"]:
            return yaml.safe_load(content)
        return json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot parse {path}: {e}") from e
