"""
Data models for block parsing.

Parsed blocks and attribute definitions come in from the outside (the block
tokenizer and the block-type registry); sourced blocks and parse results go
out as JSON-serializable dictionaries.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blockdata.exceptions import BlockDataError


class ParsedBlock(BaseModel):
    """A block as produced by the block tokenizer."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = Field(default=None, alias="blockName")
    attrs: dict[str, Any] = Field(default_factory=dict)
    inner_html: str = Field(default="", alias="innerHTML")
    inner_blocks: list["ParsedBlock"] = Field(default_factory=list, alias="innerBlocks")

    @field_validator("attrs", mode="before")
    @classmethod
    def _empty_list_as_dict(cls, value: Any) -> Any:
        # Tokenizers written in PHP encode empty attributes as []
        if value is None or value == []:
            return {}
        return value

    @property
    def is_whitespace(self) -> bool:
        """Free-text fragment with nothing but whitespace."""
        return self.name is None and not self.inner_html.strip()

    def to_dict(self) -> dict[str, Any]:
        return {
            "blockName": self.name,
            "attrs": dict(self.attrs),
            "innerHTML": self.inner_html,
            "innerBlocks": [block.to_dict() for block in self.inner_blocks],
        }


class AttributeSource(str, Enum):
    """Where an attribute value is read from."""

    ATTRIBUTE = "attribute"
    PROPERTY = "property"
    HTML = "html"
    RICH_TEXT = "rich-text"
    TEXT = "text"
    TAG = "tag"
    RAW = "raw"
    QUERY = "query"
    META = "meta"
    NODE = "node"
    CHILDREN = "children"


class AttributeDefinition(BaseModel):
    """
    Registry definition of a single block attribute.

    Keys the parser does not interpret (``type``, ``enum``, ``role``...) are
    kept as extras so debug output shows the definition as registered.
    """

    model_config = ConfigDict(extra="allow")

    source: AttributeSource | None = None
    selector: str | None = None
    attribute: str | None = None
    multiline: str | None = None
    meta: str | None = None
    default: Any = None
    query: dict[str, "AttributeDefinition"] | None = None

    @property
    def is_sourced(self) -> bool:
        return self.source is not None


class BlockTypeDefinition(BaseModel):
    """Registry entry for one block type."""

    name: str
    attributes: dict[str, AttributeDefinition] = Field(default_factory=dict)


class FilterOptions(BaseModel):
    """Block names to keep or drop. Only one of the two may be given."""

    include: list[str] | None = None
    exclude: list[str] | None = None

    @property
    def is_conflicting(self) -> bool:
        return self.include is not None and self.exclude is not None

    def allows(self, block_name: str | None) -> bool:
        """Check a block name against the include/exclude lists."""
        if self.include:
            return block_name in self.include
        if self.exclude:
            return block_name not in self.exclude
        return True


class SourcedBlock(BaseModel):
    """A block with its explicit and sourced attributes merged."""

    name: str | None
    attributes: dict[str, Any] = Field(default_factory=dict)
    inner_blocks: list["SourcedBlock"] = Field(default_factory=list)
    debug: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Stable JSON shape: ``attributes`` always present, ``innerBlocks`` only when non-empty."""
        data: dict[str, Any] = {
            "name": self.name,
            "attributes": dict(self.attributes or {}),
        }
        if self.inner_blocks:
            data["innerBlocks"] = [block.to_dict() for block in self.inner_blocks]
        if self.debug is not None:
            data["debug"] = self.debug
        return data


class ParseResult(BaseModel):
    """Successful parse output."""

    blocks: list[SourcedBlock] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    debug: dict[str, Any] | None = None

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"blocks": [block.to_dict() for block in self.blocks]}
        if self.warnings:
            data["warnings"] = list(self.warnings)
        if self.debug is not None:
            data["debug"] = self.debug
        return data


class ParseError(BaseModel):
    """Structured error returned in place of a result."""

    code: str
    message: str
    status: int
    details: str | None = None

    @property
    def success(self) -> bool:
        return False

    @classmethod
    def from_exception(cls, error: BlockDataError) -> "ParseError":
        return cls(
            code=error.code,
            message=error.message,
            status=error.status,
            details=error.details,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "status": self.status,
        }
        if self.details is not None:
            data["details"] = self.details
        return data


__all__ = [
    "AttributeDefinition",
    "AttributeSource",
    "BlockTypeDefinition",
    "FilterOptions",
    "ParseError",
    "ParseResult",
    "ParsedBlock",
    "SourcedBlock",
]
