"""Unit tests for BlockHooks chains."""

from blockdata.hooks import BlockHooks
from blockdata.models import ParsedBlock, SourcedBlock

_block = ParsedBlock(name="core/paragraph", inner_html="<p>x</p>")


class TestInclusionChain:
    def test_no_hooks_keeps_decision(self):
        hooks = BlockHooks()
        assert hooks.is_block_included(True, "core/paragraph", _block) is True
        assert hooks.is_block_included(False, "core/paragraph", _block) is False

    def test_predicates_run_in_order(self):
        hooks = BlockHooks()
        calls = []

        @hooks.allow_block
        def first(included, block_name, block):
            calls.append(("first", included))
            return False

        @hooks.allow_block
        def second(included, block_name, block):
            calls.append(("second", included))
            return not included

        assert hooks.is_block_included(True, "core/paragraph", _block) is True
        assert calls == [("first", True), ("second", False)]

    def test_decorator_returns_original_function(self):
        hooks = BlockHooks()

        def keep(included, block_name, block):
            return included

        assert hooks.allow_block(keep) is keep
        assert hooks.predicates == [keep]


class TestProcessorChain:
    def test_no_hooks_returns_same_block(self):
        sourced = SourcedBlock(name="core/paragraph")
        assert BlockHooks().process_sourced_block(sourced, "core/paragraph", None, _block) is sourced

    def test_processors_chain_results(self):
        hooks = BlockHooks()

        @hooks.sourced_block_result
        def rename(sourced, block_name, post_id, block):
            return SourcedBlock(name="acme/text", attributes=sourced.attributes)

        @hooks.sourced_block_result
        def tag(sourced, block_name, post_id, block):
            sourced.attributes["post"] = post_id
            return sourced

        result = hooks.process_sourced_block(
            SourcedBlock(name="core/paragraph"), "core/paragraph", 3, _block
        )
        assert result.to_dict() == {"name": "acme/text", "attributes": {"post": 3}}
        assert len(hooks.processors) == 2
