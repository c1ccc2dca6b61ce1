"""
DOM Query - Selector-scoped reads over a block's inner HTML.

Wraps an HTML fragment in a minimal document, parses it with the HTML5
parser and exposes CSS-selector queries over the current match set.
"""

import logging
import re
from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag
from bs4.element import PageElement
from bs4.formatter import HTMLFormatter

from blockdata.config import DOCUMENT_TEMPLATE

logger = logging.getLogger(__name__)

# ASCII whitespace only; U+00A0 is content, not spacing
WHITESPACE_RUN = re.compile(r"[ \t\n\r\f\v]+")


def escape_text(value: str) -> str:
    """HTML5 text-node escaping: &, <, > and non-breaking spaces."""
    return (
        value.replace("&", "&amp;")
        .replace("\xa0", "&nbsp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def escape_attribute(value: str) -> str:
    """HTML5 attribute escaping for double-quoted values: &, " and non-breaking spaces."""
    return value.replace("&", "&amp;").replace("\xa0", "&nbsp;").replace('"', "&quot;")


class FragmentFormatter(HTMLFormatter):
    """HTML5 serialization: document-order attributes, always double-quoted."""

    def attributes(self, tag: Tag):
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())

    def attribute_value(self, value: str) -> str:
        # Quotes are already escaped, so bs4 keeps double quotes around the value
        return escape_attribute(value)


# Void elements without a closing slash
FRAGMENT_FORMATTER = FragmentFormatter(
    entity_substitution=escape_text,
    void_element_close_prefix=None,
)


class DomQuery:
    """
    Immutable DOM scope: a parsed document plus an ordered match set.

    Usage:
        scope = DomQuery.from_fragment('<figure><img src="a.png"></figure>')
        scope.attr("src", selector="img")  # "a.png"
    """

    def __init__(self, nodes: Iterable[Tag]):
        self._nodes: tuple[Tag, ...] = tuple(nodes)

    @classmethod
    def from_fragment(cls, html: str) -> "DomQuery":
        """Parse an HTML fragment and scope to its <body>."""
        soup = BeautifulSoup(
            DOCUMENT_TEMPLATE.format(html),
            "html5lib",
            multi_valued_attributes=None,
        )
        body = soup.body
        return cls([body] if body is not None else [])

    @property
    def nodes(self) -> tuple[Tag, ...]:
        return self._nodes

    def filter(self, selector: str) -> "DomQuery":
        """Narrow to descendants of the current matches that match selector."""
        matched: list[Tag] = []
        seen: set[int] = set()

        for node in self._nodes:
            for element in node.select(selector):
                if id(element) not in seen:
                    seen.add(id(element))
                    matched.append(element)

        logger.debug(f"Selector {selector!r} matched {len(matched)} element(s)")
        return DomQuery(matched)

    def _scoped(self, selector: str | None) -> "DomQuery":
        return self.filter(selector) if selector is not None else self

    def _first(self, selector: str | None) -> Tag | None:
        scope = self._scoped(selector)
        return scope._nodes[0] if scope._nodes else None

    def count(self, selector: str | None = None) -> int:
        return len(self._scoped(selector)._nodes)

    def attr(self, name: str, selector: str | None = None) -> str | None:
        """Attribute value of the first match."""
        node = self._first(selector)
        if node is None:
            return None
        value = node.get(name)
        return value if value is None else str(value)

    def text(self, selector: str | None = None, normalize_whitespace: bool = True) -> str | None:
        """
        Text content of the first match.

        Runs of whitespace collapse to one space and the result is trimmed,
        unless ``normalize_whitespace`` is False.
        """
        node = self._first(selector)
        if node is None:
            return None

        text = node.get_text()
        if normalize_whitespace:
            text = WHITESPACE_RUN.sub(" ", text).strip()
        return text

    def html(self, selector: str | None = None) -> str | None:
        """Inner HTML of the first match."""
        node = self._first(selector)
        return node.decode_contents(formatter=FRAGMENT_FORMATTER) if node is not None else None

    def outer_html(self, selector: str | None = None) -> str | None:
        """Outer HTML of the first match."""
        node = self._first(selector)
        return node.decode(formatter=FRAGMENT_FORMATTER) if node is not None else None

    def tag_name(self, selector: str | None = None) -> str | None:
        node = self._first(selector)
        return node.name.lower() if node is not None else None

    def each(self, selector: str | None = None) -> list["DomQuery"]:
        """One single-node sub-scope per match, in document order."""
        return [DomQuery([node]) for node in self._scoped(selector)._nodes]

    def first_node(self, selector: str | None = None) -> Tag | None:
        return self._first(selector)

    def child_nodes(self, selector: str | None = None) -> list[PageElement]:
        """All child nodes of the first match, text nodes included."""
        node = self._first(selector)
        return list(node.children) if node is not None else []

    def children(self, selector: str | None = None) -> "DomQuery":
        """Element children of the first match."""
        node = self._first(selector)
        if node is None:
            return DomQuery([])
        return DomQuery(child for child in node.children if isinstance(child, Tag))

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        names = ", ".join(node.name for node in self._nodes[:5])
        return f"DomQuery([{names}{', ...' if len(self._nodes) > 5 else ''}])"
