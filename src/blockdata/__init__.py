"""
Blockdata - Structured attribute data for editor block content.

Combines a parsed block tree with registered block type definitions and
sources attribute values out of each block's inner HTML.

Usage:
    from blockdata import BlockTypeRegistry, ContentParser, StaticTokenizer

    registry = BlockTypeRegistry.from_file("blocks.yaml")
    parser = ContentParser(registry, StaticTokenizer.from_file("post.blocks.json"))

    result = parser.parse(content, post_id=42)
    print(result.to_dict())
"""

__version__ = "0.1.0"

from blockdata.config import ParserConfig
from blockdata.dom import DomQuery, NodeSerializer
from blockdata.hooks import BlockHooks
from blockdata.logging import get_logger, setup_logging
from blockdata.meta import InMemoryMetaStore, MetaStore
from blockdata.models import (
    AttributeDefinition,
    AttributeSource,
    BlockTypeDefinition,
    FilterOptions,
    ParsedBlock,
    ParseError,
    ParseResult,
    SourcedBlock,
)
from blockdata.parser import ContentParser
from blockdata.registry import BlockTypeRegistry
from blockdata.sourcing import AttributeResolver, BlockSourcer, SourcingState
from blockdata.tokenizer import StaticTokenizer, Tokenizer, has_blocks

__all__ = [
    "__version__",
    "ContentParser",
    "ParserConfig",
    "BlockTypeRegistry",
    "StaticTokenizer",
    "Tokenizer",
    "has_blocks",
    "MetaStore",
    "InMemoryMetaStore",
    "BlockHooks",
    "AttributeResolver",
    "BlockSourcer",
    "SourcingState",
    "DomQuery",
    "NodeSerializer",
    "AttributeDefinition",
    "AttributeSource",
    "BlockTypeDefinition",
    "FilterOptions",
    "ParsedBlock",
    "ParseError",
    "ParseResult",
    "SourcedBlock",
    "setup_logging",
    "get_logger",
]
