"""
Example: source attributes for a small image gallery post.

Run with:
    python examples/parse_post.py
"""

import json

from blockdata import (
    BlockHooks,
    BlockTypeRegistry,
    ContentParser,
    FilterOptions,
    ParsedBlock,
    StaticTokenizer,
    setup_logging,
)

CONTENT = """<!-- wp:heading -->
<h2>Holiday photos</h2>
<!-- /wp:heading -->

<!-- wp:gallery -->
<ul class="wp-block-gallery"><li><img src="/beach.jpg" alt="Beach"/></li><li><img src="/hill.jpg"/></li></ul>
<!-- /wp:gallery -->"""

REGISTRY = BlockTypeRegistry.from_mapping(
    {
        "core/heading": {
            "attributes": {
                "content": {"type": "string", "source": "html", "selector": "h1,h2,h3,h4,h5,h6"},
                "level": {"type": "number", "default": 2},
            }
        },
        "core/gallery": {
            "attributes": {
                "images": {
                    "type": "array",
                    "source": "query",
                    "selector": "li",
                    "query": {
                        "url": {"source": "attribute", "selector": "img", "attribute": "src"},
                        "alt": {"source": "attribute", "selector": "img", "attribute": "alt"},
                    },
                }
            }
        },
    }
)

BLOCKS = [
    ParsedBlock(name="core/heading", inner_html="\n<h2>Holiday photos</h2>\n"),
    ParsedBlock(name=None, inner_html="\n\n"),
    ParsedBlock(
        name="core/gallery",
        inner_html=(
            '\n<ul class="wp-block-gallery"><li><img src="/beach.jpg" alt="Beach"/></li>'
            '<li><img src="/hill.jpg"/></li></ul>\n'
        ),
    ),
]


def main():
    setup_logging(level="INFO")

    hooks = BlockHooks()

    @hooks.sourced_block_result
    def count_images(sourced, block_name, post_id, block):
        if block_name == "core/gallery":
            sourced.attributes["imageCount"] = len(sourced.attributes.get("images", []))
        return sourced

    parser = ContentParser(REGISTRY, StaticTokenizer(BLOCKS), hooks=hooks)

    result = parser.parse(CONTENT, post_id=1)
    print(json.dumps(result.to_dict(), indent=2))

    only_gallery = parser.parse(CONTENT, post_id=1, filter_options=FilterOptions(include=["core/gallery"]))
    print(json.dumps(only_gallery.to_dict(), indent=2))


if __name__ == "__main__":
    main()
