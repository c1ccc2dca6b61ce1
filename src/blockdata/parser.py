"""
Content Parser - Turns post content into sourced block data.

Orchestrates the tokenizer, the block-type registry and the block sourcer,
and converts every failure into a single structured ``ParseError``.
"""

import logging
import traceback

from blockdata.analytics import LoggingUsageRecorder, UsageRecorder
from blockdata.config import ParserConfig
from blockdata.exceptions import (
    BlockDataError,
    InvalidParamsError,
    NoBlocksError,
    ParserError,
)
from blockdata.hooks import BlockHooks
from blockdata.logging import log_context
from blockdata.meta import MetaStore
from blockdata.models import FilterOptions, ParseError, ParseResult
from blockdata.registry import BlockTypeSource
from blockdata.sourcing import AttributeResolver, BlockSourcer, SourcingState
from blockdata.tokenizer import Tokenizer, has_blocks

logger = logging.getLogger(__name__)


class ContentParser:
    """
    Parses post content into blocks with sourced attributes.

    Usage:
        parser = ContentParser(registry, tokenizer)
        result = parser.parse(content, post_id=42, filter_options=FilterOptions(include=["core/image"]))

        if result.success:
            payload = result.to_dict()

    The parser holds no per-call state; concurrent ``parse`` calls on one
    instance are independent as long as the registry is not mutated.
    """

    def __init__(
        self,
        registry: BlockTypeSource,
        tokenizer: Tokenizer,
        meta_store: MetaStore | None = None,
        hooks: BlockHooks | None = None,
        recorder: UsageRecorder | None = None,
        config: ParserConfig | None = None,
    ):
        self._registry = registry
        self._tokenizer = tokenizer
        self._resolver = AttributeResolver(meta_store=meta_store)
        self._hooks = hooks or BlockHooks()
        self._recorder = recorder or LoggingUsageRecorder()
        self._config = config or ParserConfig()

    def parse(
        self,
        content: str,
        post_id: int | None = None,
        filter_options: FilterOptions | None = None,
    ) -> ParseResult | ParseError:
        """
        Parse post content.

        Args:
            content: Raw post content with block delimiters
            post_id: ID of the post, needed for meta-sourced attributes
            filter_options: Block names to include or exclude

        Returns:
            ParseResult on success, ParseError otherwise
        """
        self._record_usage()
        filter_options = filter_options or FilterOptions()

        try:
            self._validate(content, post_id, filter_options)
            return self._parse_blocks(content, post_id, filter_options)
        except BlockDataError as e:
            logger.info(f"Parse rejected ({e.code}): {e.message}", extra=log_context(post_id))
            return ParseError.from_exception(e)

    def _validate(self, content: str, post_id: int | None, filter_options: FilterOptions) -> None:
        if filter_options.is_conflicting:
            raise InvalidParamsError("Cannot provide blocks to exclude and include at the same time")

        if not has_blocks(content, self._config.block_marker):
            raise NoBlocksError(
                " ".join(
                    [
                        f"Error parsing post ID {post_id or 0}: This post does not appear to contain block content.",
                        "The block data parser is designed to parse editor blocks and can not read classic editor content.",
                    ]
                )
            )

    def _parse_blocks(
        self,
        content: str,
        post_id: int | None,
        filter_options: FilterOptions,
    ) -> ParseResult:
        state = SourcingState(post_id=post_id, debug=self._config.debug)

        try:
            blocks = [
                block for block in self._tokenizer.tokenize(content) if not block.is_whitespace
            ]
            logger.debug(
                f"Tokenized {len(blocks)} top-level block(s)", extra=log_context(post_id)
            )

            sourcer = BlockSourcer(
                self._registry.get_all(),
                resolver=self._resolver,
                hooks=self._hooks,
                filters=filter_options,
            )
            result = ParseResult(
                blocks=sourcer.source_all(blocks, state),
                warnings=state.warnings,
            )

            if state.debug:
                result.debug = {
                    "blocks_parsed": [block.to_dict() for block in blocks],
                    "content": content,
                }

        except Exception as e:
            logger.error(f"Error parsing post: {e}", extra=log_context(post_id))
            raise ParserError(
                f"Error parsing post ID {post_id or 0}: {e}",
                details="".join(traceback.format_exception(e)),
            ) from e

        return result

    def _record_usage(self) -> None:
        try:
            self._recorder.record_usage()
        except Exception as e:
            logger.debug(f"Usage recording failed: {e}")
