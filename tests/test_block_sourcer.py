"""Unit tests for BlockSourcer: attribute merging, filtering, warnings and hooks."""

from blockdata.hooks import BlockHooks
from blockdata.models import FilterOptions, ParsedBlock
from blockdata.registry import BlockTypeRegistry
from blockdata.sourcing.blocks import BlockSourcer, SourcingState


# ── Helpers ──────────────────────────────────────────────────────────────────

REGISTRY = BlockTypeRegistry.from_mapping(
    {
        "core/image": {
            "attributes": {
                "url": {"type": "string", "source": "attribute", "selector": "img", "attribute": "src"},
                "alt": {
                    "type": "string",
                    "source": "attribute",
                    "selector": "img",
                    "attribute": "alt",
                    "default": "",
                },
                "caption": {"type": "string", "source": "html", "selector": "figcaption"},
                "sizeSlug": {"type": "string", "default": "large"},
                "id": {"type": "number"},
            }
        },
        "core/group": {"attributes": {"tagName": {"type": "string", "default": "div"}}},
        "core/paragraph": {
            "attributes": {"content": {"type": "string", "source": "html", "selector": "p"}}
        },
        "core/separator": {"attributes": {}},
    }
)


def _block(
    name: str | None,
    html: str = "",
    attrs: dict | None = None,
    inner: list[ParsedBlock] | None = None,
) -> ParsedBlock:
    return ParsedBlock(name=name, attrs=attrs or {}, inner_html=html, inner_blocks=inner or [])


def _image(src: str = "/a.png", alt: str | None = None, **attrs) -> ParsedBlock:
    alt_attr = f' alt="{alt}"' if alt is not None else ""
    return _block(
        "core/image",
        f'<figure class="wp-block-image"><img src="{src}"{alt_attr}/></figure>',
        attrs,
    )


def _paragraph(text: str) -> ParsedBlock:
    return _block("core/paragraph", f"<p>{text}</p>")


def _sourcer(**kwargs) -> BlockSourcer:
    return BlockSourcer(REGISTRY.get_all(), **kwargs)


# ── Attribute merging ────────────────────────────────────────────────────────


class TestAttributes:
    def test_sourced_and_explicit_attributes_merged(self):
        sourced = _sourcer().source(_image(alt="Cat", id=7), SourcingState())
        assert sourced.attributes == {
            "id": 7,
            "url": "/a.png",
            "alt": "Cat",
            "sizeSlug": "large",
        }

    def test_sourced_default_used_when_selector_misses(self):
        sourced = _sourcer().source(_image(), SourcingState())
        assert sourced.attributes["alt"] == ""

    def test_unsourced_explicit_value_kept(self):
        sourced = _sourcer().source(_image(sizeSlug="full"), SourcingState())
        assert sourced.attributes["sizeSlug"] == "full"

    def test_unsourced_without_default_left_unset(self):
        sourced = _sourcer().source(_image(), SourcingState())
        assert "id" not in sourced.attributes
        assert "caption" not in sourced.attributes

    def test_sourced_value_overwrites_explicit(self):
        sourced = _sourcer().source(_image(src="/b.png", url="/stale.png"), SourcingState())
        assert sourced.attributes["url"] == "/b.png"

    def test_attribute_order_follows_explicit_then_registry(self):
        sourced = _sourcer().source(_image(alt="x", id=1), SourcingState())
        assert list(sourced.attributes) == ["id", "url", "alt", "sizeSlug"]

    def test_empty_attributes_present_in_output(self):
        sourced = _sourcer().source(_block("core/separator", "<hr/>"), SourcingState())
        assert sourced.to_dict() == {"name": "core/separator", "attributes": {}}


# ── Inner blocks ─────────────────────────────────────────────────────────────


class TestInnerBlocks:
    def test_inner_blocks_sourced_recursively(self):
        group = _block("core/group", "<div></div>", inner=[_paragraph("One"), _image()])
        data = _sourcer().source(group, SourcingState()).to_dict()

        assert data["attributes"] == {"tagName": "div"}
        assert [inner["name"] for inner in data["innerBlocks"]] == ["core/paragraph", "core/image"]
        assert data["innerBlocks"][0]["attributes"] == {"content": "One"}

    def test_inner_blocks_key_omitted_when_empty(self):
        data = _sourcer().source(_paragraph("x"), SourcingState()).to_dict()
        assert "innerBlocks" not in data

    def test_inner_blocks_key_omitted_when_all_filtered(self):
        group = _block("core/group", inner=[_paragraph("x")])
        sourcer = _sourcer(filters=FilterOptions(exclude=["core/paragraph"]))
        assert "innerBlocks" not in sourcer.source(group, SourcingState()).to_dict()


# ── Filtering ────────────────────────────────────────────────────────────────


class TestFiltering:
    def test_include_keeps_only_listed(self):
        sourcer = _sourcer(filters=FilterOptions(include=["core/paragraph"]))
        result = sourcer.source_all([_paragraph("a"), _image(), _paragraph("b")], SourcingState())
        assert [block.name for block in result] == ["core/paragraph", "core/paragraph"]

    def test_exclude_drops_listed(self):
        sourcer = _sourcer(filters=FilterOptions(exclude=["core/paragraph"]))
        result = sourcer.source_all([_paragraph("a"), _image()], SourcingState())
        assert [block.name for block in result] == ["core/image"]

    def test_excluded_parent_drops_descendants(self):
        group = _block("core/group", inner=[_paragraph("a")])
        sourcer = _sourcer(filters=FilterOptions(exclude=["core/group"]))
        assert sourcer.source(group, SourcingState()) is None

    def test_include_must_list_parents_too(self):
        group = _block("core/group", inner=[_paragraph("a")])
        sourcer = _sourcer(filters=FilterOptions(include=["core/paragraph"]))
        assert sourcer.source(group, SourcingState()) is None


# ── Warnings ─────────────────────────────────────────────────────────────────


class TestWarnings:
    def test_unregistered_block_kept_with_explicit_attrs(self):
        state = SourcingState()
        sourced = _sourcer().source(_block("acme/card", "<div>x</div>", {"color": "red"}), state)
        assert sourced.to_dict() == {"name": "acme/card", "attributes": {"color": "red"}}

    def test_one_warning_per_unregistered_name(self):
        state = SourcingState()
        group = _block("acme/card", inner=[_block("acme/card"), _block("acme/badge")])
        _sourcer().source(group, state)
        assert state.warnings == [
            'Block type "acme/card" is not server-side registered. '
            "Sourced block attributes will not be available.",
            'Block type "acme/badge" is not server-side registered. '
            "Sourced block attributes will not be available.",
        ]

    def test_registered_block_adds_no_warning(self):
        state = SourcingState()
        _sourcer().source(_paragraph("x"), state)
        assert state.warnings == []


# ── Hooks ────────────────────────────────────────────────────────────────────


class TestHooks:
    def test_inclusion_hook_can_drop_block(self):
        hooks = BlockHooks()

        @hooks.allow_block
        def no_images(included, block_name, block):
            return included and block_name != "core/image"

        result = _sourcer(hooks=hooks).source_all([_image(), _paragraph("a")], SourcingState())
        assert [block.name for block in result] == ["core/paragraph"]

    def test_inclusion_hook_can_restore_filtered_block(self):
        hooks = BlockHooks()

        @hooks.allow_block
        def always(included, block_name, block):
            return True

        sourcer = _sourcer(hooks=hooks, filters=FilterOptions(exclude=["core/image"]))
        assert sourcer.source(_image(), SourcingState()) is not None

    def test_processor_receives_context(self):
        hooks = BlockHooks()
        seen = []

        @hooks.sourced_block_result
        def record(sourced, block_name, post_id, block):
            seen.append((block_name, post_id, block.inner_html))
            return sourced

        _sourcer(hooks=hooks).source(_paragraph("a"), SourcingState(post_id=5))
        assert seen == [("core/paragraph", 5, "<p>a</p>")]

    def test_processor_result_replaces_block(self):
        hooks = BlockHooks()

        @hooks.sourced_block_result
        def strip_attributes(sourced, block_name, post_id, block):
            sourced.attributes = None
            return sourced

        data = _sourcer(hooks=hooks).source(_paragraph("a"), SourcingState()).to_dict()
        assert data["attributes"] == {}


# ── Debug ────────────────────────────────────────────────────────────────────


class TestDebug:
    def test_debug_adds_definitions(self):
        sourced = _sourcer().source(_paragraph("a"), SourcingState(debug=True))
        assert sourced.debug == {
            "block_definition_attributes": {
                "content": {"type": "string", "source": "html", "selector": "p"}
            }
        }

    def test_debug_for_unregistered_block_is_none(self):
        sourced = _sourcer().source(_block("acme/card"), SourcingState(debug=True))
        assert sourced.debug == {"block_definition_attributes": None}

    def test_debug_off_by_default(self):
        assert "debug" not in _sourcer().source(_paragraph("a"), SourcingState()).to_dict()
