"""
Block Sourcer - Merges explicit and sourced attributes for a block tree.
"""

import copy
import logging
from dataclasses import dataclass, field

from blockdata.config import MISSING_BLOCK_WARNING
from blockdata.dom import DomQuery
from blockdata.hooks import BlockHooks
from blockdata.logging import log_context
from blockdata.models import (
    AttributeDefinition,
    BlockTypeDefinition,
    FilterOptions,
    ParsedBlock,
    SourcedBlock,
)
from blockdata.sourcing.attributes import AttributeResolver

logger = logging.getLogger(__name__)


@dataclass
class SourcingState:
    """Per-parse state threaded through the block tree walk."""

    post_id: int | None = None
    debug: bool = False
    warnings: list[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        if message not in self.warnings:
            self.warnings.append(message)


class BlockSourcer:
    """
    Sources the attributes of a block and, recursively, its inner blocks.

    Blocks rejected by the include/exclude lists or the inclusion hooks are
    dropped together with all their descendants.
    """

    def __init__(
        self,
        definitions: dict[str, BlockTypeDefinition],
        resolver: AttributeResolver | None = None,
        hooks: BlockHooks | None = None,
        filters: FilterOptions | None = None,
    ):
        self._definitions = definitions
        self._resolver = resolver or AttributeResolver()
        self._hooks = hooks or BlockHooks()
        self._filters = filters or FilterOptions()

    def source_all(self, blocks: list[ParsedBlock], state: SourcingState) -> list[SourcedBlock]:
        """Source a list of sibling blocks, dropping excluded ones."""
        sourced = [self.source(block, state) for block in blocks]
        return [block for block in sourced if block is not None]

    def source(self, block: ParsedBlock, state: SourcingState) -> SourcedBlock | None:
        """
        Source one block.

        Returns:
            The sourced block, or None if the block is filtered out
        """
        block_name = block.name

        if not self._is_included(block):
            logger.debug(
                f"Skipping block {block_name}",
                extra=log_context(state.post_id, block_name),
            )
            return None

        definition = self._definitions.get(block_name) if block_name is not None else None
        if definition is None:
            logger.warning(
                f"Block type {block_name!r} is not registered",
                extra=log_context(state.post_id, block_name),
            )
            state.warn(MISSING_BLOCK_WARNING.format(block_name or ""))

        attribute_definitions = definition.attributes if definition is not None else {}
        attributes = self._source_attributes(block, attribute_definitions, state)

        sourced = SourcedBlock(
            name=block_name,
            attributes=attributes,
            inner_blocks=self.source_all(block.inner_blocks, state),
        )

        if state.debug:
            sourced.debug = {
                "block_definition_attributes": (
                    {
                        name: item.model_dump(mode="json", exclude_none=True)
                        for name, item in attribute_definitions.items()
                    }
                    if definition is not None
                    else None
                ),
            }

        sourced = self._hooks.process_sourced_block(sourced, block_name, state.post_id, block)

        # Stable output shape
        if not sourced.attributes:
            sourced.attributes = {}

        return sourced

    def _is_included(self, block: ParsedBlock) -> bool:
        included = self._filters.allows(block.name)
        return self._hooks.is_block_included(included, block.name, block)

    def _source_attributes(
        self,
        block: ParsedBlock,
        definitions: dict[str, AttributeDefinition],
        state: SourcingState,
    ) -> dict:
        attributes = dict(block.attrs)
        scope: DomQuery | None = None

        for name, definition in definitions.items():
            if not definition.is_sourced:
                # Unsourced attributes live in the block delimiter
                if name not in attributes and definition.default is not None:
                    attributes[name] = copy.deepcopy(definition.default)
                continue

            if scope is None:
                scope = DomQuery.from_fragment(block.inner_html)

            value = self._resolver.resolve(scope, definition, state.post_id)
            if value is not None:
                attributes[name] = value

        return attributes
