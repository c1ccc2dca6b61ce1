"""
Block Hooks - Inclusion predicates and post-processors for sourced blocks.

Hooks are registered on a ``BlockHooks`` instance with decorators and run in
registration order. With no hooks registered, every block keeps its computed
inclusion decision and its sourced result unchanged.
"""

import logging
from collections.abc import Callable

from blockdata.models import ParsedBlock, SourcedBlock

logger = logging.getLogger(__name__)

InclusionPredicate = Callable[[bool, str | None, ParsedBlock], bool]
BlockProcessor = Callable[[SourcedBlock, str | None, int | None, ParsedBlock], SourcedBlock]


class BlockHooks:
    """
    Chains of block hooks.

    Usage:
        hooks = BlockHooks()

        @hooks.allow_block
        def drop_spacers(included, block_name, block):
            return included and block_name != "core/spacer"

        @hooks.sourced_block_result
        def add_anchor(sourced, block_name, post_id, block):
            sourced.attributes.setdefault("anchor", "")
            return sourced

    Hooks must not raise; a fault inside a hook fails the whole parse.
    """

    def __init__(self):
        self._predicates: list[InclusionPredicate] = []
        self._processors: list[BlockProcessor] = []

    def allow_block(self, func: InclusionPredicate) -> InclusionPredicate:
        """Register an inclusion predicate."""
        self._predicates.append(func)
        logger.debug(f"Registered inclusion hook: {func.__name__}")
        return func

    def sourced_block_result(self, func: BlockProcessor) -> BlockProcessor:
        """Register a sourced block post-processor."""
        self._processors.append(func)
        logger.debug(f"Registered block processor: {func.__name__}")
        return func

    def is_block_included(
        self,
        included: bool,
        block_name: str | None,
        block: ParsedBlock,
    ) -> bool:
        for predicate in self._predicates:
            included = bool(predicate(included, block_name, block))
        return included

    def process_sourced_block(
        self,
        sourced: SourcedBlock,
        block_name: str | None,
        post_id: int | None,
        block: ParsedBlock,
    ) -> SourcedBlock:
        for processor in self._processors:
            sourced = processor(sourced, block_name, post_id, block)
        return sourced

    @property
    def predicates(self) -> list[InclusionPredicate]:
        return list(self._predicates)

    @property
    def processors(self) -> list[BlockProcessor]:
        return list(self._processors)
